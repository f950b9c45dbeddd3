"""Pydantic v2 configuration schema with strict validation."""

import logging

from pydantic import BaseModel, Field, field_validator

from bigrm.config.defaults import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_DB_PATH,
    DEFAULT_FORECAST_URL,
    DEFAULT_KEY_NAME,
    DEFAULT_LOCATION,
)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = DEFAULT_LOCATION["name"]
    latitude: float = Field(default=DEFAULT_LOCATION["latitude"], ge=-90.0, le=90.0)
    longitude: float = Field(default=DEFAULT_LOCATION["longitude"], ge=-180.0, le=180.0)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_FORECAST_URL
    timeout_seconds: float | None = Field(default=None, gt=0.0)
    api_key_env: str = DEFAULT_API_KEY_ENV


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = DEFAULT_DB_PATH
    key_name: str = Field(default=DEFAULT_KEY_NAME, min_length=1)


class PromptConfig(BaseModel):
    model_config = {"extra": "forbid"}

    mask_input: bool = False


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {value}")
        return name


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: LocationConfig = LocationConfig()
    api: ApiConfig = ApiConfig()
    storage: StorageConfig = StorageConfig()
    prompt: PromptConfig = PromptConfig()
    logging: LoggingConfig = LoggingConfig()
