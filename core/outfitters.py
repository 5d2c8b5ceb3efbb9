# core/outfitters.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Outfitter:
    id: str
    name: str
    neighborhood: str
    description: str
    price: str
    address: str
    lat: float
    long: float
    image_name: str

    @property
    def coordinate(self) -> Tuple[float, float]:
        return (self.lat, self.long)


OUTFITTERS: Tuple[Outfitter, ...] = (
    Outfitter(
        id="lions-club",
        name="Lion's Club",
        neighborhood="TXST",
        description="Relaxing escape in the San Marcos river. Float time lasts an hour and ends at Rio Vista Falls.",
        price="Adult Tube: $25",
        address="170 Charles Austin Dr, San Marcos, TX",
        lat=29.88595,
        long=-97.93500,
        image_name="lions",
    ),
    Outfitter(
        id="texas-state-tubes",
        name="Texas State Tubes",
        neighborhood="San Marcos",
        description="Tube privately with a party or walk up and float through the Texas Hill Country.",
        price="Adult Tube: $30",
        address="2024 North Old Bastrop Hwy, San Marcos, TX",
        lat=29.85607,
        long=-97.89953,
        image_name="txtube",
    ),
    Outfitter(
        id="paddle-smtx",
        name="Paddle SMTX",
        neighborhood="TXST",
        description="Crystal kayak glow tour at night. The photo is the meeting location where the trailer of kayaks will be.",
        price="Adult Kayak: $55 per person",
        address="170 Charles Austin Dr, San Marcos, TX",
        lat=29.88595,
        long=-97.93500,
        image_name="paddle",
    ),
    Outfitter(
        id="alamo-adventures",
        name="Alamo Adventures",
        neighborhood="San Marcos",
        description="Guided Stand Up Paddleboard through the San Marcos river lasting about 2.5 hours.",
        price="Contact for Pricing: 512-203-0094",
        address="602 N 1-35 Frontage Rd, San Marcos, TX",
        lat=29.87475,
        long=-97.93047,
        image_name="alamo",
    ),
    Outfitter(
        id="great-gonzos",
        name="Great Gonzo's Tubes & Shuttles",
        neighborhood="San Marcos",
        description="Three sets of class 1 rapids with your 2-hour river ride.",
        price="Adult Tube: $30, Cooler Tube: $22",
        address="19385 San Marcos Hwy, San Marcos, TX",
        lat=29.86212,
        long=-97.87744,
        image_name="gonzo",
    ),
)


def find_outfitter(outfitter_id: str, outfitters: Iterable[Outfitter] = OUTFITTERS) -> Outfitter:
    """Look up an outfitter by id. Raises KeyError if no record matches."""
    for o in outfitters:
        if o.id == outfitter_id:
            return o
    raise KeyError(f"Unknown outfitter id: {outfitter_id!r}")
