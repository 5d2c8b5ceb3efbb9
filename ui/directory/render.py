# ui/directory/render.py
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

import streamlit as st

from core.filters import filter_outfitters, neighborhood_options
from core.image_cache import image_to_base64, load_outfitter_image
from core.map_view import build_deck, overview_region, pins_frame
from core.outfitters import OUTFITTERS, Outfitter
from core.theme import PRIMARY_GREEN
from ui.directory.logic import FILTER_KEY, PERSIST_KEY, count_caption, on_filter_change, seed_filter
from ui.shared.navigation import push_detail
from ui.shared.text import html_attr, html_text

logger = logging.getLogger(__name__)

THUMB_SIZE = 140  # px; displayed at 70px for crisp edges


def _row_html(outfitter: Outfitter) -> str:
    img = load_outfitter_image(outfitter.image_name, outfitter.name).copy()
    img.thumbnail((THUMB_SIZE, THUMB_SIZE))
    b64 = image_to_base64(img)
    return (
        '<div class="ro-row">'
        f'<img class="ro-thumb" src="data:image/png;base64,{b64}" alt="{html_attr(outfitter.name)}"/>'
        "<div>"
        f"<b>{html_text(outfitter.name)}</b><br/>"
        f'<span class="ro-neighborhood">{html_text(outfitter.neighborhood)}</span>'
        "</div>"
        "</div>"
    )


def _render_rows(visible: Sequence[Outfitter]) -> None:
    if not visible:
        st.info("No outfitters in this neighborhood.")
        return

    for outfitter in visible:
        c_row, c_open = st.columns([4, 1], vertical_alignment="center")
        with c_row:
            st.markdown(_row_html(outfitter), unsafe_allow_html=True)
        with c_open:
            st.button(
                "View details",
                key=f"open_{outfitter.id}",
                on_click=push_detail,
                args=(outfitter,),
                width="stretch",
            )


def render(settings: Dict[str, Any], outfitters: Sequence[Outfitter] = OUTFITTERS) -> None:
    """Directory screen: header, neighborhood filter, outfitter rows, overview map."""
    st.markdown(f'<h1 class="ro-header">{html_text(settings["app_title"])}</h1>', unsafe_allow_html=True)

    options = neighborhood_options(outfitters)
    seed_filter(settings, options)

    selection = st.radio(
        "Neighborhood",
        options=options,
        horizontal=True,
        key=FILTER_KEY,
        on_change=on_filter_change,
        label_visibility="collapsed",
    )

    # Copy widget value into persistent storage
    st.session_state[PERSIST_KEY] = selection

    visible = filter_outfitters(outfitters, selection)
    st.caption(count_caption(len(visible), len(outfitters)))

    _render_rows(visible)

    deck = build_deck(
        overview_region(settings),
        pins_frame(visible, tint=PRIMARY_GREEN),
        map_style=settings["map_style"],
        pin_radius=settings["pin_radius"],
    )
    st.pydeck_chart(deck)
