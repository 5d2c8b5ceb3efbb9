# ui/detail/render.py
from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from core.image_cache import image_to_base64, load_outfitter_image
from core.map_view import build_deck, detail_region, pins_frame
from core.outfitters import Outfitter
from core.theme import PRIMARY_GREEN
from ui.shared.navigation import pop_screen
from ui.shared.text import html_attr, html_text, md_escape


def render(settings: Dict[str, Any], outfitter: Outfitter) -> None:
    """Detail screen for a single outfitter. Read-only."""
    st.button(f"← {settings['app_title']}", key="detail_back", on_click=pop_screen)

    img = load_outfitter_image(outfitter.image_name, outfitter.name)
    st.markdown(
        f'<img class="ro-hero" src="data:image/png;base64,{image_to_base64(img)}" alt="{html_attr(outfitter.name)}"/>',
        unsafe_allow_html=True,
    )

    st.markdown(f'<h2 class="ro-detail-title">{html_text(outfitter.name)}</h2>', unsafe_allow_html=True)
    st.caption(f"Neighborhood: {md_escape(outfitter.neighborhood)}")
    st.caption(f"Address: {md_escape(outfitter.address)}")
    st.markdown(f"Description: {md_escape(outfitter.description)}")
    st.markdown(f'<p class="ro-price">Price: {html_text(outfitter.price)}</p>', unsafe_allow_html=True)

    deck = build_deck(
        detail_region(outfitter, settings),
        pins_frame([outfitter], tint=PRIMARY_GREEN),
        map_style=settings["map_style"],
        pin_radius=settings["pin_radius"],
    )
    st.pydeck_chart(deck)
