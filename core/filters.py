# core/filters.py
from typing import Iterable, List

from core.outfitters import Outfitter


ALL_NEIGHBORHOODS = "All"


def neighborhood_options(outfitters: Iterable[Outfitter]) -> List[str]:
    """Filter choices: "All" first, then each neighborhood in order of first appearance."""
    seen = dict.fromkeys(o.neighborhood for o in outfitters)
    return [ALL_NEIGHBORHOODS] + [n for n in seen if n != ALL_NEIGHBORHOODS]


def filter_outfitters(outfitters: Iterable[Outfitter], selection: str) -> List[Outfitter]:
    items = list(outfitters)
    if selection == ALL_NEIGHBORHOODS:
        return items
    return [o for o in items if o.neighborhood == selection]
