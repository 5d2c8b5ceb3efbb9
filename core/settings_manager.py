import json
import logging
import math
import os
from copy import deepcopy
from pathlib import Path

logger = logging.getLogger(__name__)

APP_ROOT = Path(__file__).resolve().parent.parent
SETTINGS_FILE = APP_ROOT / "data" / "settings.json"
SETTINGS_ENV_VAR = "RIVER_OUTFITTERS_SETTINGS"

MAX_SPAN = 180.0
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_SETTINGS = {
    "app_title": "River Outfitters",
    "default_neighborhood": "All",

    # Overview map: fixed region around the San Marcos river.
    "overview_center": [29.878654, -97.923086],
    "overview_span": 0.07,

    # Detail map span, centered on the selected outfitter.
    "detail_span": 0.05,

    "map_style": "light",
    "pin_radius": 60,
    "log_level": "INFO",
}


def settings_path() -> Path:
    override = os.getenv(SETTINGS_ENV_VAR)
    return Path(override) if override else SETTINGS_FILE


def _clean_span(raw, default: float) -> float:
    try:
        val = float(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric map span %r", raw)
        return default
    if not math.isfinite(val) or val <= 0:
        logger.warning("Ignoring non-positive map span %r", raw)
        return default
    return min(val, MAX_SPAN)


def _clean_center(raw, default):
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        logger.warning("Ignoring malformed map center %r", raw)
        return list(default)
    try:
        lat, lon = float(raw[0]), float(raw[1])
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric map center %r", raw)
        return list(default)
    if not (math.isfinite(lat) and math.isfinite(lon)) or abs(lat) > 90 or abs(lon) > 180:
        logger.warning("Ignoring out-of-range map center %r", raw)
        return list(default)
    return [lat, lon]


def load_settings(path: Path | None = None) -> dict:
    """Load app settings, merged with defaults.

    The file is optional and read-only; nothing here is ever written back.
    """
    merged = deepcopy(DEFAULT_SETTINGS)
    path = path or settings_path()
    if not path.exists():
        return merged

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return merged

    if not isinstance(loaded, dict):
        logger.warning("Settings file %s does not hold a JSON object; using defaults", path)
        return merged

    for k, v in loaded.items():
        if k not in DEFAULT_SETTINGS:
            logger.warning("Ignoring unknown setting %r", k)
            continue
        merged[k] = v

    # Validate the values the map and logging layers depend on.
    merged["overview_span"] = _clean_span(merged["overview_span"], DEFAULT_SETTINGS["overview_span"])
    merged["detail_span"] = _clean_span(merged["detail_span"], DEFAULT_SETTINGS["detail_span"])
    merged["overview_center"] = _clean_center(merged["overview_center"], DEFAULT_SETTINGS["overview_center"])

    try:
        merged["pin_radius"] = max(1, int(merged["pin_radius"]))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric pin radius %r", merged["pin_radius"])
        merged["pin_radius"] = DEFAULT_SETTINGS["pin_radius"]

    level = str(merged["log_level"]).upper()
    merged["log_level"] = level if level in LOG_LEVELS else DEFAULT_SETTINGS["log_level"]

    for key in ("app_title", "default_neighborhood", "map_style"):
        if not isinstance(merged[key], str) or not merged[key].strip():
            merged[key] = DEFAULT_SETTINGS[key]

    return merged
