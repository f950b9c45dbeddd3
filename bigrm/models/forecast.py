"""OpenWeather one-call response models.

Identity fields (timezone, coordinates, timestamps) are required; everything
the report only displays is optional and rendered with a fallback literal.
"""

from pydantic import BaseModel, ValidationError, field_validator

from bigrm.errors import ForecastParseError


class WeatherCondition(BaseModel):
    description: str | None = None


def _first_description(conditions: list[WeatherCondition]) -> str | None:
    if not conditions:
        return None
    return conditions[0].description or None


def _conditions_list(value: object) -> object:
    # weather: null and null entries both mean no conditions
    if value is None:
        return []
    if isinstance(value, list):
        return [c for c in value if c is not None]
    return value


class CurrentConditions(BaseModel):
    dt: int
    sunrise: int | None = None
    sunset: int | None = None
    temp: float | None = None
    feels_like: float | None = None
    wind_speed: float | None = None
    uvi: float | None = None
    humidity: int | None = None
    clouds: int | None = None
    visibility: int | None = None
    weather: list[WeatherCondition] = []

    @field_validator("weather", mode="before")
    @classmethod
    def drop_null_conditions(cls, value: object) -> object:
        return _conditions_list(value)

    @property
    def description(self) -> str | None:
        return _first_description(self.weather)


class DailyTemperature(BaseModel):
    day: float | None = None


class DailyForecast(BaseModel):
    dt: int
    wind_speed: float | None = None
    temp: DailyTemperature | None = None
    weather: list[WeatherCondition] = []

    @field_validator("weather", mode="before")
    @classmethod
    def drop_null_conditions(cls, value: object) -> object:
        return _conditions_list(value)

    @property
    def description(self) -> str | None:
        return _first_description(self.weather)

    @property
    def day_temp(self) -> float | None:
        return self.temp.day if self.temp is not None else None


class WeatherAlert(BaseModel):
    event: str | None = None
    sender_name: str | None = None
    start: int | None = None
    end: int | None = None
    description: str | None = None


class ForecastResponse(BaseModel):
    timezone: str
    lat: float
    lon: float
    current: CurrentConditions
    daily: list[DailyForecast] = []
    alerts: list[WeatherAlert] = []

    @field_validator("daily", "alerts", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def alert_count(self) -> int:
        return len(self.alerts)


def parse_forecast(raw: object) -> ForecastResponse:
    """Validate a decoded one-call JSON body."""
    if not isinstance(raw, dict):
        raise ForecastParseError(
            f"Forecast response is not a JSON object (got {type(raw).__name__})"
        )
    try:
        return ForecastResponse.model_validate(raw)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) for err in e.errors()
        )
        raise ForecastParseError(f"Invalid forecast response, check: {fields}") from e
