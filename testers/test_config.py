# -*- coding: utf-8 -*-
import json
import logging

import pytest

from objweld.utils.config import DEFAULT_CONFIG, LoaderConfig


def test_defaults():
    cfg = LoaderConfig()
    assert cfg["attribute_policy"] == "pad"
    assert cfg["normal_mode"] == "point"
    assert cfg["pad_normal"] == [0.0, 0.0, 1.0]


def test_defaults_are_not_shared():
    cfg = LoaderConfig()
    cfg.data["pad_normal"].append(9.0)
    assert DEFAULT_CONFIG["pad_normal"] == [0.0, 0.0, 1.0]


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "objweld.json"
    path.write_text(json.dumps({"attribute_policy": "strict"}), encoding="utf-8")
    cfg = LoaderConfig(path)
    assert cfg["attribute_policy"] == "strict"
    assert cfg["normal_mode"] == "point"


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="objweld"):
        cfg = LoaderConfig(tmp_path / "absent.json")
    assert cfg.data == DEFAULT_CONFIG
    assert "No config file" in caplog.text
    assert not (tmp_path / "absent.json").exists()


def test_broken_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="objweld"):
        cfg = LoaderConfig(path)
    assert cfg.data == DEFAULT_CONFIG
    assert "Failed to read config" in caplog.text


@pytest.mark.parametrize("overrides", [
    {"attribute_policy": "ignore"},
    {"normal_mode": "magic"},
    {"pad_normal": [0, 1]},
    {"pad_texcoord": [0, 0, 0]},
    {"pad_normal": "abc"},
    {"pad_normal": 5},
    {"pad_normal": ["x", 0, 1]},
    {"pad_texcoord": [[0, 0]]},
    {"log_level": "LOUD"},
    {"log_level": 10},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValueError):
        LoaderConfig(**overrides)


def test_save_round_trip(tmp_path):
    path = tmp_path / "saved.json"
    LoaderConfig(normal_mode="inverse_transpose").save(path)
    assert LoaderConfig(path)["normal_mode"] == "inverse_transpose"


def test_save_without_path():
    with pytest.raises(ValueError):
        LoaderConfig().save()


def test_pads_are_normalized_to_float_lists():
    cfg = LoaderConfig(pad_normal=(0, 1, 0), pad_texcoord=(0.5, 1))
    assert cfg["pad_normal"] == [0.0, 1.0, 0.0]
    assert cfg["pad_texcoord"] == [0.5, 1.0]


def test_log_level_is_case_insensitive():
    assert LoaderConfig(log_level="debug")["log_level"] == "debug"


def test_invalid_log_level_in_file_is_rejected(tmp_path):
    path = tmp_path / "loud.json"
    path.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")
    with pytest.raises(ValueError):
        LoaderConfig(path)
