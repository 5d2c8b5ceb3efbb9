# app.py
import logging

import streamlit as st

from core.settings_manager import load_settings
from core.theme import APP_CSS
from ui.detail.render import render as detail_render
from ui.directory.render import render as directory_render
from ui.shared.navigation import DETAIL_SCREEN, current_screen, open_deep_link, reset_navigation

# --- Initialize Settings ---
if "app_settings" not in st.session_state:
    st.session_state.app_settings = load_settings()

settings = st.session_state.app_settings

logging.basicConfig(
    level=settings["log_level"],
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("river_outfitters")

st.set_page_config(
    page_title=settings["app_title"],
    page_icon="🛶",
    layout="centered",
    initial_sidebar_state="collapsed",
)

st.markdown(APP_CSS, unsafe_allow_html=True)

open_deep_link(st.query_params.get("outfitter"))

try:
    screen = current_screen()
except ValueError as exc:
    logger.error("Bad navigation state, returning to directory: %s", exc)
    reset_navigation()
    screen = current_screen()

if screen["screen"] == DETAIL_SCREEN:
    detail_render(settings, screen["outfitter"])
else:
    directory_render(settings)
