
"""
core.image_cache
-----------------
Image loading and caching for the River Outfitters Streamlit app.

Outfitter photos live under assets/outfitters/<image_name>.jpg (or .png).
A missing photo is not an error: callers get a generated placeholder tile
in the app palette instead.
"""

import base64
import io
import logging
from pathlib import Path

import streamlit as st
from PIL import Image, ImageDraw, ImageFont

from core.theme import PRIMARY_GREEN, SECONDARY_GREEN

logger = logging.getLogger(__name__)

ASSETS = Path(__file__).resolve().parent.parent / "assets" / "outfitters"
IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png")
PLACEHOLDER_SIZE = 256


def _find_asset(image_name: str) -> Path:
    for suffix in IMAGE_SUFFIXES:
        p = ASSETS / f"{image_name}{suffix}"
        if p.exists():
            return p
    raise FileNotFoundError(f"Missing outfitter image: {ASSETS / image_name}")


def placeholder_image(label: str, size: int = PLACEHOLDER_SIZE) -> Image.Image:
    """Square secondary-green tile with the label's initial in primary green."""
    img = Image.new("RGB", (size, size), SECONDARY_GREEN)
    initial = (label.strip()[:1] or "?").upper()

    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default(size=max(8, size // 2))

    left, top, right, bottom = draw.textbbox((0, 0), initial, font=font)
    x = (size - (right - left)) / 2 - left
    y = (size - (bottom - top)) / 2 - top
    draw.text((x, y), initial, fill=PRIMARY_GREEN, font=font)
    return img


@st.cache_resource(show_spinner=False)
def load_outfitter_image(image_name: str, label: str = "") -> Image.Image:
    """Load an outfitter photo, falling back to a placeholder tile."""
    try:
        src = _find_asset(image_name)
        return Image.open(src).convert("RGB")
    except FileNotFoundError:
        logger.info("No image asset for %r; using placeholder", image_name)
        return placeholder_image(label or image_name)


def image_to_base64(img: Image.Image) -> str:
    """PNG-encode an image for inline <img> rendering."""
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")
