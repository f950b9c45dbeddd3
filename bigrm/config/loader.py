"""YAML config loader."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from bigrm.config.defaults import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH
from bigrm.config.schema import AppConfig
from bigrm.errors import ConfigError

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Config path from $BIGRM_CONFIG, falling back to ~/.config/bigrm/config.yaml."""
    return Path(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH).expanduser()


def load_config(path: str | Path | None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing file or an empty document yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path).expanduser()
    if not path.is_file():
        logger.debug("No config file at %s, using defaults", path)
        return AppConfig()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Unable to read config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
