"""Open-Meteo forecast API client."""

import logging

import httpx

from weathernow.config.schema import FORECAST_BASE_URL

logger = logging.getLogger(__name__)

HOURLY_FIELDS = (
    "temperature_2m",
    "precipitation",
    "weathercode",
    "windspeed_10m",
    "relativehumidity_2m",
)
DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "weathercode",
)


class ForecastClient:
    def __init__(
        self,
        base_url: str = FORECAST_BASE_URL,
        timeout: float = 10.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.http = http

    async def get_forecast(self, lat: float, lon: float) -> dict:
        """Fetch current conditions plus hourly and daily series in local time."""
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }
        try:
            resp = await self._get(url, params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Forecast API error for %.4f,%.4f: %s", lat, lon, e)
            raise
        except httpx.RequestError as e:
            logger.error("Forecast request failed for %.4f,%.4f: %s", lat, lon, e)
            raise

    async def _get(self, url: str, params: dict) -> httpx.Response:
        if self.http is not None:
            return await self.http.get(url, params=params, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params=params)
