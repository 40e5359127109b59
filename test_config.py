"""
Tests for the configuration manager.
"""

import json

from gradient_engine.utils.config import Config


def test_defaults_when_file_is_missing(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    assert config.get("bounds.width") == 1
    assert config.get("bounds.height") == 1
    assert config.get("output.indent") == 2
    assert config.get("nothing.here", "fallback") == "fallback"


def test_file_values_are_merged_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"bounds": {"width": 640}}))

    config = Config(str(path))
    assert config.get("bounds.width") == 640
    assert config.get("bounds.height") == 1


def test_invalid_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = Config(str(path))
    assert config.get("bounds.width") == 1


def test_set_and_get(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("logging.console_level", "DEBUG")
    config.set("custom.nested.value", 3)

    assert config.get("logging.console_level") == "DEBUG"
    assert config.get("custom.nested.value") == 3


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    config.set("bounds.height", 50)
    config.save()

    assert Config(str(path)).get("bounds.height") == 50


def test_get_all_returns_a_copy(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    values = config.get_all()
    values["bounds"]["width"] = 99
    assert config.get("bounds.width") == 1
