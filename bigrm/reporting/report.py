"""Plain text rendering of a one-call forecast."""

from bigrm.models.forecast import DailyForecast, ForecastResponse, WeatherAlert
from bigrm.reporting.formatters import (
    format_temperature,
    format_value,
    format_visibility,
    to_date_time,
    to_day_name,
    to_time_only,
)

NO_DESCRIPTION = "none available"


def _field(label: str, value: str) -> str:
    return f"  {label + ':':<16}{value}"


def format_daily_line(day: DailyForecast) -> str:
    return (
        f"  {to_day_name(day.dt)}: {day.description or NO_DESCRIPTION}, "
        f"wind {format_value(day.wind_speed, ' m/s')}, "
        f"{format_temperature(day.day_temp)}"
    )


def format_alert(alert: WeatherAlert) -> str:
    lines = [
        f"Alert: {format_value(alert.event)}",
        _field("Issued by", format_value(alert.sender_name)),
        _field("Starts", to_date_time(alert.start)),
        _field("Ends", to_date_time(alert.end)),
        f"  {alert.description or NO_DESCRIPTION}",
    ]
    return "\n".join(lines)


def render_report(forecast: ForecastResponse, place_name: str) -> str:
    """Render the fixed-layout report.

    Only the first alert is shown in detail; the count covers all of them.
    """
    current = forecast.current
    lines = [
        "OpenWeather forecast",
        _field("Timezone", forecast.timezone),
        _field("Place", place_name),
        _field("Location", f"{forecast.lat}, {forecast.lon}"),
        _field("Forecast time", to_date_time(current.dt)),
        _field("Sunrise", to_time_only(current.sunrise)),
        _field("Sunset", to_time_only(current.sunset)),
        "",
        "Current conditions",
        _field("Wind speed", format_value(current.wind_speed, " m/s")),
        _field("UV index", format_value(current.uvi)),
        _field("Humidity", format_value(current.humidity, "%")),
        _field("Cloud cover", format_value(current.clouds, "%")),
        _field("Visibility", format_visibility(current.visibility)),
        _field("Temperature", format_temperature(current.temp)),
        _field("Feels like", format_temperature(current.feels_like)),
        _field("Conditions", current.description or NO_DESCRIPTION),
        "",
        "Daily outlook",
        *(format_daily_line(day) for day in forecast.daily),
        "",
        f"Alerts issued: {forecast.alert_count}",
    ]
    if forecast.alerts:
        lines.extend(["", format_alert(forecast.alerts[0])])
    return "\n".join(lines)
