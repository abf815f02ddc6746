"""
test_config_manager.py
----------------------
Tests for JSON config loading and default merging.
"""

import json

import pytest

from invaders.core.services import config_manager
from invaders.core.services.config_manager import load_config
from invaders.game import DEFAULT_CONFIG


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_merges_nested_values_onto_defaults(tmp_path):
    path = write_json(tmp_path / "custom.json", {"display": {"scale": 5}, "_notes": "ignored"})

    config = load_config(path, {"display": {"scale": 3, "fps": 60}})

    assert config == {"display": {"scale": 5, "fps": 60}}


def test_defaults_are_not_mutated(tmp_path):
    defaults = {"audio": {"enabled": True}}
    config = load_config(write_json(tmp_path / "a.json", {}), defaults)

    config["audio"]["enabled"] = False

    assert defaults["audio"]["enabled"] is True


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = load_config(str(tmp_path / "nope.json"), {"display": {"fps": 60}})
    assert config == {"display": {"fps": 60}}


def test_missing_file_strict_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"), strict=True)


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path), {"x": 1}) == {"x": 1}


def test_non_object_top_level_is_rejected(tmp_path):
    path = write_json(tmp_path / "list.json", [1, 2, 3])
    with pytest.raises(FileNotFoundError):
        load_config(path, strict=True)


def test_shipped_settings_resolve_by_name():
    config_manager.rebuild_file_index()
    config = load_config("settings.json", DEFAULT_CONFIG, strict=True)

    assert set(config) == {"display", "audio", "logging"}
    assert config["audio"]["shoot_sound"] == "assets/audio/shoot.wav"
    assert "_notes" not in config


def test_name_without_extension_resolves():
    config_manager.rebuild_file_index()
    assert load_config("settings", {}, strict=True)["display"]["fps"] == 60
