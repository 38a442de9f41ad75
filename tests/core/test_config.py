"""Tests for configuration loading and updates."""

import json

import pytest

from genetics.core.config import (
    GeneticsConfig,
    get_config_path,
    load_config,
    save_config,
    set_config_value,
)
from genetics.core.models import ConfigError


class TestDefaults:
    def test_defaults(self):
        config = GeneticsConfig()
        assert config.generation.seed == 42
        assert config.generation.use_morphs is True
        assert config.generation.beard_chance == 5
        assert config.makeup.apply_foundation is True
        assert config.makeup.apply_makeup is False
        assert config.makeup.pale_lipstick_color == 139
        assert config.makeup.dark_lipstick_color == 4916319

    def test_keys(self):
        keys = GeneticsConfig().keys()
        assert "generation.seed" in keys
        assert "makeup.apply_makeup" in keys
        assert "factions.settler" in keys


class TestSetValue:
    """Tests for set_config_value."""

    def test_set_int(self):
        config = set_config_value(GeneticsConfig(), "generation.seed", "7")
        assert config.generation.seed == 7

    def test_set_hex_int(self):
        config = set_config_value(GeneticsConfig(), "generation.seed", "0xFF")
        assert config.generation.seed == 255

    def test_set_bool(self):
        config = set_config_value(GeneticsConfig(), "makeup.apply_makeup", "yes")
        assert config.makeup.apply_makeup is True

    def test_set_color_accepts_strings(self):
        config = set_config_value(GeneticsConfig(), "makeup.pale_lipstick_color", "#8B0000")
        assert config.makeup.pale_lipstick_color == "#8B0000"

    def test_original_unchanged(self):
        original = GeneticsConfig()
        set_config_value(original, "generation.seed", "7")
        assert original.generation.seed == 42

    @pytest.mark.parametrize("key", ["invalid.key", "generation", "generation.nope"])
    def test_unknown_key(self, key):
        with pytest.raises(ConfigError, match="Unknown key"):
            set_config_value(GeneticsConfig(), key, "1")

    def test_invalid_integer(self):
        with pytest.raises(ConfigError, match="Invalid integer"):
            set_config_value(GeneticsConfig(), "generation.seed", "abc")

    def test_invalid_boolean(self):
        with pytest.raises(ConfigError, match="Invalid boolean"):
            set_config_value(GeneticsConfig(), "generation.use_morphs", "maybe")

    def test_out_of_range(self):
        with pytest.raises(ConfigError, match="Invalid value"):
            set_config_value(GeneticsConfig(), "generation.beard_chance", "101")


class TestPersistence:
    """Tests for load_config/save_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.json") == GeneticsConfig()

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = set_config_value(GeneticsConfig(), "generation.seed", "99")

        save_config(config, path)

        assert load_config(path) == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"makeup": {"apply_makeup": True}}))

        config = load_config(path)

        assert config.makeup.apply_makeup is True
        assert config.generation.seed == 42

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"generation": {"seed": -1}}))
        with pytest.raises(ConfigError, match="invalid"):
            load_config(path)

    def test_env_var_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GENETICS_CONFIG", str(tmp_path / "custom.json"))
        assert get_config_path() == tmp_path / "custom.json"
