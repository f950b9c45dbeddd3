"""Default location, endpoint and storage settings."""

APP_NAME = "bigrm"
APP_VERSION = "0.1.0"
COPYRIGHT = "Copyright (c) 2021 bigrm authors. Released under the MIT License."

DEFAULT_LOCATION = {
    "name": "Barry, Wales, UK",
    "latitude": 51.419212,
    "longitude": -3.291481,
}

DEFAULT_FORECAST_URL = "https://api.openweathermap.org/data/2.5/onecall"
DEFAULT_API_KEY_ENV = "OPENWEATHER_API_KEY"
API_KEY_SIGNUP_URL = "https://openweathermap.org/price"

CONFIG_PATH_ENV = "BIGRM_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/bigrm/config.yaml"
DEFAULT_DB_PATH = "~/.config/bigrm/storage.db"
DEFAULT_KEY_NAME = "owApiKey"
