"""Exception types raised by bigrm components and mapped to exit codes by the CLI."""

from pathlib import Path


class BigrmError(Exception):
    """Base class for failures that end the current invocation."""

    exit_code = 1


class MissingCredentialError(BigrmError):
    """No API key available after the environment, store and prompt were tried."""


class StorageAccessError(BigrmError):
    """Raised when the credential database cannot be opened, read or written."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None

    @property
    def hint(self) -> str:
        location = f"'{self.path}'" if self.path else "the storage directory"
        return (
            f"Read and write access to {location} is required to remember the "
            "OpenWeather API key. Check its permissions, or set storage.db_path "
            "in the config file to a writable location."
        )


class ConfigError(BigrmError):
    """Raised when the config file cannot be parsed or fails validation."""


class ForecastParseError(BigrmError):
    """Raised when a forecast response body is not a usable forecast document."""
