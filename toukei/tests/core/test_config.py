"""Tests for toukei.config: project-wide configuration management."""

import json

import pytest

from toukei.config import (
    CONFIG_SCHEMA,
    default_config,
    load_config,
    save_config,
    set_config_value,
    unset_config_value,
)


class TestDefaultConfig:
    def test_returns_all_keys(self):
        cfg = default_config()
        for key in CONFIG_SCHEMA:
            assert key in cfg

    def test_default_values(self):
        cfg = default_config()
        assert cfg["types"] == []
        assert cfg["show_aliases"] is True

    def test_defaults_are_copies(self):
        cfg = default_config()
        cfg["types"].append("Rust")
        assert CONFIG_SCHEMA["types"].default == []


class TestLoadSave:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.json") == default_config()

    def test_round_trip(self, tmp_path):
        p = tmp_path / ".toukei" / "config.json"
        cfg = default_config()
        cfg["types"] = ["Rust", "Go"]
        save_config(cfg, p)
        assert load_config(p) == cfg
        assert p.read_text().endswith("\n")

    def test_fills_missing_keys(self, tmp_path):
        p = tmp_path / "config.json"
        p.write_text(json.dumps({"types": ["C"]}))
        cfg = load_config(p)
        assert cfg["types"] == ["C"]
        assert cfg["show_aliases"] is True

    def test_corrupt_file_falls_back(self, tmp_path):
        p = tmp_path / "config.json"
        p.write_text("{not json")
        assert load_config(p) == default_config()

    def test_non_object_falls_back(self, tmp_path):
        p = tmp_path / "config.json"
        p.write_text("[1, 2]")
        assert load_config(p) == default_config()


class TestSetConfigValue:
    def test_bool_values(self):
        cfg = default_config()
        set_config_value(cfg, "show_aliases", "false")
        assert cfg["show_aliases"] is False
        set_config_value(cfg, "show_aliases", "yes")
        assert cfg["show_aliases"] is True

    def test_bool_rejects_garbage(self):
        with pytest.raises(ValueError, match="Expected true/false"):
            set_config_value(default_config(), "show_aliases", "maybe")

    def test_types_canonicalized_and_deduplicated(self):
        cfg = default_config()
        set_config_value(cfg, "types", "rust")
        set_config_value(cfg, "types", "RUST")
        set_config_value(cfg, "types", "hpp")
        assert cfg["types"] == ["Rust", "Hpp"]

    def test_types_rejects_unknown_tag(self):
        with pytest.raises(ValueError, match="Unknown language tag"):
            set_config_value(default_config(), "types", "Cobol")

    def test_unknown_key(self):
        with pytest.raises(KeyError, match="Unknown config key"):
            set_config_value(default_config(), "colour", "red")


class TestUnsetConfigValue:
    def test_resets_to_default(self):
        cfg = default_config()
        cfg["types"] = ["C"]
        unset_config_value(cfg, "types")
        assert cfg["types"] == []

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            unset_config_value(default_config(), "nope")
