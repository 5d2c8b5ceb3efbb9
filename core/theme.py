# core/theme.py
from typing import Tuple

RGB = Tuple[int, int, int]

PRIMARY_GREEN: RGB = (78, 99, 94)
ACCENT_YELLOW: RGB = (226, 224, 8)
SECONDARY_GREEN: RGB = (168, 180, 158)
MUTED_GREEN: RGB = (129, 140, 120)
LIGHT_BACKGROUND: RGB = (212, 208, 185)


def to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


APP_CSS = f"""
    <style>
    /* Light sandy background for every screen */
    .stApp {{
        background-color: {to_hex(LIGHT_BACKGROUND)};
    }}

    /* Header: bold primary green with a soft shadow */
    .ro-header {{
        color: {to_hex(PRIMARY_GREEN)};
        font-weight: 700;
        text-shadow: 0 2px 5px rgba(0, 0, 0, 0.25);
        margin-bottom: 0.25rem;
    }}

    /* Segmented neighborhood picker */
    div[data-testid="stRadio"] > div {{
        background-color: {to_hex(SECONDARY_GREEN)};
        border-radius: 10px;
        padding: 0.35rem 0.75rem;
        box-shadow: 0 2px 5px rgba(0, 0, 0, 0.2);
    }}

    /* Buttons pick up the accent color on hover */
    div[data-testid="stButton"] button:hover {{
        border-color: {to_hex(ACCENT_YELLOW)};
        color: {to_hex(PRIMARY_GREEN)};
    }}

    /* Outfitter rows */
    .ro-row {{
        background-color: {to_hex(SECONDARY_GREEN)};
        border-radius: 10px;
        padding: 0.4rem 0.75rem;
        margin: 0.3rem 0;
        display: flex;
        align-items: center;
        gap: 10px;
    }}
    .ro-row .ro-neighborhood {{
        color: {to_hex(MUTED_GREEN)};
        font-size: 0.9rem;
    }}

    /* Circular thumbnails in the list */
    .ro-thumb {{
        width: 70px;
        height: 70px;
        object-fit: cover;
        border-radius: 50%;
        box-shadow: 0 2px 5px rgba(0, 0, 0, 0.3);
    }}

    /* Detail hero image and map */
    .ro-hero {{
        width: 100%;
        border-radius: 15px;
        box-shadow: 0 4px 10px rgba(0, 0, 0, 0.3);
    }}

    .ro-detail-title {{
        color: {to_hex(PRIMARY_GREEN)};
        font-weight: 700;
    }}

    .ro-price {{
        color: {to_hex(PRIMARY_GREEN)};
    }}
    </style>
"""
