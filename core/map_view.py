# core/map_view.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import pandas as pd
import pydeck as pdk

from core.outfitters import Outfitter
from core.settings_manager import DEFAULT_SETTINGS
from core.theme import PRIMARY_GREEN, RGB

MIN_ZOOM = 0.0
MAX_ZOOM = 20.0


@dataclass(frozen=True)
class MapRegion:
    center_lat: float
    center_lon: float
    span: float  # degrees, as in a lat/long delta

    @property
    def zoom(self) -> float:
        return span_to_zoom(self.span)


def span_to_zoom(span: float) -> float:
    """Convert a coordinate span in degrees to a web-mercator zoom level."""
    if span <= 0:
        raise ValueError(f"Map span must be positive, got {span!r}")
    zoom = math.log2(360.0 / span)
    return round(max(MIN_ZOOM, min(zoom, MAX_ZOOM)), 2)


def overview_region(settings: Optional[Dict[str, Any]] = None) -> MapRegion:
    s = settings or DEFAULT_SETTINGS
    lat, lon = s["overview_center"]
    return MapRegion(float(lat), float(lon), float(s["overview_span"]))


def detail_region(outfitter: Outfitter, settings: Optional[Dict[str, Any]] = None) -> MapRegion:
    s = settings or DEFAULT_SETTINGS
    lat, lon = outfitter.coordinate
    return MapRegion(lat, lon, float(s["detail_span"]))


def pins_frame(outfitters: Iterable[Outfitter], tint: RGB = PRIMARY_GREEN) -> pd.DataFrame:
    """One pin row per outfitter, in input order."""
    rows = [
        {
            "name": o.name,
            "neighborhood": o.neighborhood,
            "lat": o.lat,
            "lon": o.long,
            "tint": list(tint) + [230],
        }
        for o in outfitters
    ]
    return pd.DataFrame(rows, columns=["name", "neighborhood", "lat", "lon", "tint"])


def build_deck(
    region: MapRegion,
    pins: pd.DataFrame,
    *,
    map_style: str = DEFAULT_SETTINGS["map_style"],
    pin_radius: int = DEFAULT_SETTINGS["pin_radius"],
) -> pdk.Deck:
    pin_layer = pdk.Layer(
        "ScatterplotLayer",
        data=pins,
        get_position="[lon, lat]",
        get_fill_color="tint",
        get_radius=pin_radius,
        radius_min_pixels=6,
        stroked=True,
        get_line_color=[255, 255, 255],
        line_width_min_pixels=1,
        pickable=True,
    )

    view_state = pdk.ViewState(
        latitude=region.center_lat,
        longitude=region.center_lon,
        zoom=region.zoom,
    )
    tooltip = {
        "html": "<b>{name}</b><br/>{neighborhood}",
        "style": {"backgroundColor": "rgba(0,0,0,0.7)", "color": "white"},
    }

    return pdk.Deck(
        layers=[pin_layer],
        initial_view_state=view_state,
        tooltip=tooltip,
        map_style=map_style,
    )
