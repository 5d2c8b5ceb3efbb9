import pytest

from core.outfitters import OUTFITTERS
from core.settings_manager import DEFAULT_SETTINGS


@pytest.fixture
def outfitters():
    return list(OUTFITTERS)


@pytest.fixture
def settings():
    return dict(DEFAULT_SETTINGS)


@pytest.fixture(autouse=True)
def _no_settings_override(monkeypatch):
    monkeypatch.delenv("RIVER_OUTFITTERS_SETTINGS", raising=False)
