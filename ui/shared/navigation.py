#ui/shared/navigation.py
import logging
from typing import Any, Dict, List, MutableMapping, Optional

import streamlit as st

from core.outfitters import Outfitter, find_outfitter

logger = logging.getLogger(__name__)

NAV_STACK_KEY = "nav_stack"
DIRECTORY_SCREEN = "directory"
DETAIL_SCREEN = "detail"
DEEP_LINK_DONE_KEY = "deep_link_done"


def _state(state: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def _stack(state: MutableMapping[str, Any]) -> List[Dict[str, Any]]:
    stack = state.get(NAV_STACK_KEY)
    if not isinstance(stack, list) or not stack:
        stack = [{"screen": DIRECTORY_SCREEN}]
        state[NAV_STACK_KEY] = stack
    return stack


def current_screen(state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, Any]:
    """Top of the screen stack. The directory is always at the bottom."""
    entry = _stack(_state(state))[-1]
    if entry.get("screen") == DETAIL_SCREEN and not isinstance(entry.get("outfitter"), Outfitter):
        raise ValueError("Detail screen entry is missing its outfitter record")
    return entry


def push_detail(outfitter: Outfitter, state: Optional[MutableMapping[str, Any]] = None) -> None:
    if not isinstance(outfitter, Outfitter):
        raise ValueError(f"Expected an Outfitter, got {type(outfitter).__name__}")
    stack = _stack(_state(state))
    stack.append({"screen": DETAIL_SCREEN, "outfitter": outfitter})
    logger.debug("Opened detail for %s (depth %d)", outfitter.id, len(stack))


def pop_screen(state: Optional[MutableMapping[str, Any]] = None) -> None:
    stack = _stack(_state(state))
    if len(stack) > 1:
        stack.pop()
    logger.debug("Back to %s (depth %d)", stack[-1]["screen"], len(stack))


def reset_navigation(state: Optional[MutableMapping[str, Any]] = None) -> None:
    _state(state)[NAV_STACK_KEY] = [{"screen": DIRECTORY_SCREEN}]


def open_deep_link(outfitter_id: Optional[str], state: Optional[MutableMapping[str, Any]] = None) -> bool:
    """Push the detail screen for ?outfitter=<id>, once per session."""
    ss = _state(state)
    if ss.get(DEEP_LINK_DONE_KEY) or not outfitter_id:
        return False
    ss[DEEP_LINK_DONE_KEY] = True
    try:
        outfitter = find_outfitter(outfitter_id)
    except KeyError:
        logger.warning("Ignoring link to unknown outfitter %r", outfitter_id)
        return False
    push_detail(outfitter, ss)
    return True
