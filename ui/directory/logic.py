#ui/directory/logic.py
import logging
from typing import Any, Dict, List

import streamlit as st

from core.filters import ALL_NEIGHBORHOODS

logger = logging.getLogger(__name__)

FILTER_KEY = "directory_neighborhood"
PERSIST_KEY = "directory_neighborhood_persist"


def seed_filter(settings: Dict[str, Any], options: List[str]) -> None:
    """Seed the filter widget key before the widget is created.

    Widget state is pruned while the detail screen is up, so the selection is
    kept under a separate key and copied back when the directory returns.
    """
    ss = st.session_state
    if PERSIST_KEY not in ss or ss[PERSIST_KEY] not in options:
        default = settings.get("default_neighborhood", ALL_NEIGHBORHOODS)
        if default not in options:
            logger.warning("Configured neighborhood %r is not a filter option; using %r", default, ALL_NEIGHBORHOODS)
            default = ALL_NEIGHBORHOODS
        ss[PERSIST_KEY] = default

    if ss.get(FILTER_KEY) not in options:
        ss[FILTER_KEY] = ss[PERSIST_KEY]


def on_filter_change() -> None:
    logger.debug("Neighborhood filter changed to %r", st.session_state.get(FILTER_KEY))


def count_caption(visible: int, total: int) -> str:
    noun = "outfitter" if total == 1 else "outfitters"
    return f"{visible} of {total} {noun}"
