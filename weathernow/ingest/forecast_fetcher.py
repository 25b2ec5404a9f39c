"""Forecast fetcher: retrieves and parses forecasts for a location."""

import logging
from typing import Any

from weathernow.ingest.forecast_client import ForecastClient
from weathernow.models.forecast import (
    DailySeries,
    Forecast,
    HourlySeries,
    WeatherSnapshot,
)
from weathernow.models.location import Location

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: ForecastClient):
        self.client = client

    async def fetch(self, location: Location) -> Forecast | None:
        """Fetch and parse the forecast for a location.

        Any failure (network, HTTP status, malformed payload, mismatched
        series) is logged and reported as None.
        """
        try:
            raw = await self.client.get_forecast(location.lat, location.lon)
            return parse_forecast(raw)
        except Exception:
            logger.exception("Failed to fetch forecast for %s", location.name)
            return None


def parse_forecast(raw: dict) -> Forecast:
    """Build a Forecast from an Open-Meteo response.

    Missing optional arrays are filled with defaults here so rendering code
    never has to guess. Raises ValueError/KeyError/TypeError on malformed data.
    """
    current = raw.get("current_weather")
    hourly = raw.get("hourly")
    daily = raw.get("daily")
    return Forecast(
        current=_parse_current(current) if current else None,
        hourly=_parse_hourly(hourly) if hourly else None,
        daily=_parse_daily(daily) if daily else None,
        timezone=raw.get("timezone") or "",
    )


def _parse_current(c: dict) -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature=_optional_float(c.get("temperature")),
        wind_speed=float(c.get("windspeed") or 0.0),
        weather_code=int(c.get("weathercode") or 0),
        timestamp=str(c.get("time") or ""),
    )


def _optional_float(v: Any) -> float | None:
    return None if v is None else float(v)


def _column(data: dict, key: str, n: int, default: Any) -> list:
    values = data.get(key)
    if values is None:
        return [default] * n
    return [default if v is None else v for v in values]


def _parse_hourly(h: dict) -> HourlySeries:
    times = list(h["time"])
    n = len(times)
    return HourlySeries(
        time=tuple(times),
        temperature=tuple(_optional_float(v) for v in h["temperature_2m"]),
        precipitation=tuple(float(v) for v in _column(h, "precipitation", n, 0.0)),
        weather_code=tuple(int(v) for v in _column(h, "weathercode", n, 0)),
        humidity=tuple(
            _optional_float(v) for v in _column(h, "relativehumidity_2m", n, None)
        ),
    )


def _parse_daily(d: dict) -> DailySeries:
    times = list(d["time"])
    n = len(times)
    return DailySeries(
        time=tuple(times),
        temp_max=tuple(_optional_float(v) for v in d["temperature_2m_max"]),
        temp_min=tuple(_optional_float(v) for v in d["temperature_2m_min"]),
        weather_code=tuple(int(v) for v in _column(d, "weathercode", n, 0)),
        sunrise=tuple(str(v) for v in _column(d, "sunrise", n, "")),
        sunset=tuple(str(v) for v in _column(d, "sunset", n, "")),
    )
