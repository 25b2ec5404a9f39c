"""Open-Meteo geocoding API client."""

import logging

import httpx

from weathernow.config.schema import GEOCODING_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 6


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_BASE_URL,
        timeout: float = 10.0,
        language: str = "en",
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.language = language
        self.http = http

    async def search(self, name: str, count: int = DEFAULT_COUNT) -> list[dict]:
        """Search places by free-text name. Returns the raw result objects.

        A response without a "results" key means no matches.
        """
        url = f"{self.base_url}/search"
        params = {
            "name": name,
            "count": count,
            "language": self.language,
            "format": "json",
        }
        try:
            resp = await self._get(url, params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Geocoding API error for name=%r: %s", name, e)
            raise
        except httpx.RequestError as e:
            logger.error("Geocoding request failed for name=%r: %s", name, e)
            raise
        return data.get("results") or []

    async def _get(self, url: str, params: dict) -> httpx.Response:
        if self.http is not None:
            return await self.http.get(url, params=params, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params=params)
