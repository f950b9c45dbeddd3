"""OpenWeather one-call API client."""

import logging
from urllib.parse import urlencode

import httpx

from bigrm.config.defaults import APP_NAME, APP_VERSION
from bigrm.errors import ForecastParseError
from bigrm.models.forecast import ForecastResponse, parse_forecast
from bigrm.reporting.report import render_report

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"
EXCLUDE = "minutely,hourly"
UNITS = "metric"


def build_forecast_url(
    base_url: str, latitude: float, longitude: float, api_key: str
) -> str:
    query = urlencode({
        "lat": latitude,
        "lon": longitude,
        "exclude": EXCLUDE,
        "units": UNITS,
        "appid": api_key,
    })
    return f"{base_url}?{query}"


def redact_url(url: str) -> str:
    """Strip the appid value so the key never reaches the logs."""
    parsed = httpx.URL(url)
    if "appid" not in parsed.params:
        return url
    return str(parsed.copy_set_param("appid", "***"))


class OpenWeatherClient:
    """Issues a single forecast request. No retries; failures propagate."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def fetch_forecast(self, url: str) -> ForecastResponse:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.info("Requesting forecast: %s", redact_url(url))
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            resp = await client.get(url, headers=headers)
        if resp.status_code >= 400:
            logger.error(
                "OpenWeather returned %d: %s", resp.status_code, resp.text[:200]
            )
        resp.raise_for_status()
        try:
            raw = resp.json()
        except ValueError as e:
            raise ForecastParseError(f"Forecast response is not valid JSON: {e}") from e
        return parse_forecast(raw)

    async def fetch_report(self, url: str, place_name: str) -> str:
        forecast = await self.fetch_forecast(url)
        logger.info(
            "Forecast for %s: %d daily entries, %d alerts",
            forecast.timezone, len(forecast.daily), forecast.alert_count,
        )
        return render_report(forecast, place_name)
