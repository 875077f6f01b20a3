import json
import os
import tempfile

import pytest

from strongpass.config import DEFAULTS, ConfigurationError, StrengthConfig, config_path, load_config, save_config

def test_defaults():
    cfg = StrengthConfig()
    assert cfg.min_entropy == 18
    assert cfg.min_word_length == 4
    assert cfg.every_dictionary_word is True
    assert cfg.extra_dictionary_words == ()
    assert cfg.use_dictionary is True
    assert StrengthConfig.from_mapping(DEFAULTS) == cfg

def test_extra_words_are_frozen():
    words = ["acme"]
    cfg = StrengthConfig(extra_dictionary_words=words)
    words.append("other")
    assert cfg.extra_dictionary_words == ("acme",)

def test_config_is_immutable():
    cfg = StrengthConfig()
    try:
        cfg.min_entropy = 1
        changed = True
    except AttributeError:
        changed = False
    assert not changed

@pytest.mark.parametrize("options", [
    {"extra_dictionary_words": ["ok", 1]},
    {"extra_dictionary_words": "acme"},
    {"extra_dictionary_words": 5},
    {"min_word_length": 0},
    {"min_word_length": "4"},
    {"min_word_length": True},
    {"min_entropy": "high"},
    {"every_dictionary_word": "yes"},
    {"use_dictionary": 1},
    {"colour": "blue"},
])
def test_invalid_options(options):
    with pytest.raises(ConfigurationError):
        StrengthConfig.from_mapping(options)

def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)

def test_int_min_entropy_becomes_float():
    assert StrengthConfig(min_entropy=20).min_entropy == 20.0
    assert isinstance(StrengthConfig(min_entropy=20).min_entropy, float)

def test_none_means_default():
    assert StrengthConfig.from_mapping({"min_entropy": None}).min_entropy == 18

def test_replace_and_to_dict():
    cfg = StrengthConfig().replace(min_entropy=30, extra_dictionary_words=["acme"])
    assert cfg.min_entropy == 30
    d = cfg.to_dict()
    assert d["extra_dictionary_words"] == ["acme"]
    assert StrengthConfig.from_mapping(d) == cfg

def test_config_path_uses_appdata(monkeypatch):
    with tempfile.TemporaryDirectory() as td:
        monkeypatch.setenv("APPDATA", td)
        assert config_path() == os.path.join(td, "StrongPass", "config.json")

def test_load_missing_file_gives_defaults():
    with tempfile.TemporaryDirectory() as td:
        assert load_config(os.path.join(td, "nope.json")) == DEFAULTS

def test_save_and_load_roundtrip():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "sub", "config.json")
        save_config({"min_entropy": 25.0, "extra_dictionary_words": ["acme"]}, path)
        cfg = load_config(path)
        # missing keys come from defaults
        assert cfg["min_entropy"] == 25.0
        assert cfg["extra_dictionary_words"] == ["acme"]
        assert cfg["min_word_length"] == 4

def test_corrupt_file_falls_back_to_defaults(caplog):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_config(path) == DEFAULTS
        assert "Ignoring" in caplog.text

def test_non_object_file_falls_back_to_defaults():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump([1, 2, 3], f)
        assert load_config(path) == DEFAULTS
