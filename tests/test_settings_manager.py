import json

from core.settings_manager import DEFAULT_SETTINGS, load_settings, settings_path


def _write(tmp_path, payload):
    p = tmp_path / "settings.json"
    p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return p


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.json") == DEFAULT_SETTINGS


def test_defaults_are_not_shared(tmp_path):
    s = load_settings(tmp_path / "absent.json")
    s["overview_center"].append(0)
    assert len(DEFAULT_SETTINGS["overview_center"]) == 2


def test_values_merge_over_defaults(tmp_path):
    p = _write(tmp_path, {"app_title": "Float Finder", "default_neighborhood": "TXST", "detail_span": 0.02})
    s = load_settings(p)
    assert s["app_title"] == "Float Finder"
    assert s["default_neighborhood"] == "TXST"
    assert s["detail_span"] == 0.02
    assert s["overview_span"] == DEFAULT_SETTINGS["overview_span"]


def test_malformed_json_falls_back(tmp_path, caplog):
    p = _write(tmp_path, "{not json")
    assert load_settings(p) == DEFAULT_SETTINGS
    assert "Could not read settings" in caplog.text


def test_non_object_falls_back(tmp_path):
    assert load_settings(_write(tmp_path, [1, 2, 3])) == DEFAULT_SETTINGS


def test_unknown_keys_are_ignored(tmp_path):
    s = load_settings(_write(tmp_path, {"favorite_river": "Guadalupe"}))
    assert "favorite_river" not in s


def test_bad_values_are_cleaned(tmp_path):
    s = load_settings(_write(tmp_path, {
        "overview_span": -3,
        "detail_span": 500,
        "overview_center": ["north", 1],
        "pin_radius": "big",
        "log_level": "chatty",
        "map_style": "",
    }))
    assert s["overview_span"] == DEFAULT_SETTINGS["overview_span"]
    assert s["detail_span"] == 180.0
    assert s["overview_center"] == DEFAULT_SETTINGS["overview_center"]
    assert s["pin_radius"] == DEFAULT_SETTINGS["pin_radius"]
    assert s["log_level"] == "INFO"
    assert s["map_style"] == DEFAULT_SETTINGS["map_style"]


def test_log_level_is_normalized(tmp_path):
    assert load_settings(_write(tmp_path, {"log_level": "debug"}))["log_level"] == "DEBUG"


def test_env_var_overrides_path(tmp_path, monkeypatch):
    p = _write(tmp_path, {"app_title": "From Env"})
    monkeypatch.setenv("RIVER_OUTFITTERS_SETTINGS", str(p))
    assert settings_path() == p
    assert load_settings()["app_title"] == "From Env"


def test_infinite_pin_radius_falls_back(tmp_path, caplog):
    for raw in ('{"pin_radius": Infinity}', '{"pin_radius": 1e999}'):
        s = load_settings(_write(tmp_path, raw))
        assert s["pin_radius"] == DEFAULT_SETTINGS["pin_radius"]
    assert "Ignoring non-numeric pin radius" in caplog.text
