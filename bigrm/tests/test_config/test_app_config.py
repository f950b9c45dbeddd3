"""Tests for config loading and schema validation."""

from pathlib import Path

import pytest
import yaml

from bigrm.config.defaults import DEFAULT_FORECAST_URL
from bigrm.config.loader import default_config_path, load_config
from bigrm.config.schema import AppConfig
from bigrm.errors import ConfigError


class TestLoadConfig:
    def test_none_uses_defaults(self):
        config = load_config(None)
        assert config == AppConfig()
        assert config.api.base_url == DEFAULT_FORECAST_URL
        assert config.api.timeout_seconds is None

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config.storage.key_name == "owApiKey"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_load_from_yaml(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump({
                "location": {"name": "Cardiff", "latitude": 51.48, "longitude": -3.18},
                "prompt": {"mask_input": True},
                "logging": {"level": "debug"},
            }, f)
        config = load_config(path)
        assert config.location.name == "Cardiff"
        assert config.prompt.mask_input is True
        assert config.logging.level == "DEBUG"

    def test_unknown_key_raises(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("location:\n  city: Cardiff\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_latitude_out_of_range(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("location:\n  latitude: 120\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_bad_log_level(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  level: chatty\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("location: [unclosed\n")
        with pytest.raises(ConfigError, match="Unable to read"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)


class TestDefaultConfigPath:
    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("BIGRM_CONFIG", str(tmp_path / "x.yaml"))
        assert default_config_path() == tmp_path / "x.yaml"

    def test_fallback(self, monkeypatch):
        monkeypatch.delenv("BIGRM_CONFIG", raising=False)
        path = default_config_path()
        assert path.name == "config.yaml"
        assert "~" not in str(path)
