"""Tests for the geocoding API client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from weathernow.ingest.geocoding_client import GeocodingClient

SEARCH_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def geocoder() -> GeocodingClient:
    return GeocodingClient(base_url="https://test-geo.example.com/v1", timeout=1.0)


class TestSearch:
    @respx.mock
    def test_success(self, geocoder: GeocodingClient, geocoding_payload: dict):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=geocoding_payload)
        )
        results = asyncio.run(geocoder.search("Paris"))
        assert len(results) == 6
        assert results[0]["admin1"] == "Île-de-France"

    @respx.mock
    def test_query_params(self, geocoder: GeocodingClient):
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        asyncio.run(geocoder.search("San Fr", count=6))
        params = route.calls[0].request.url.params
        assert params["name"] == "San Fr"
        assert params["count"] == "6"
        assert params["language"] == "en"
        assert params["format"] == "json"

    @respx.mock
    def test_missing_results_key(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.3})
        )
        assert asyncio.run(geocoder.search("zzzz")) == []

    @respx.mock
    def test_http_error_raises(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(500))
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(geocoder.search("Paris"))

    @respx.mock
    def test_network_error_raises(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(side_effect=httpx.ConnectError("boom"))
        with pytest.raises(httpx.RequestError):
            asyncio.run(geocoder.search("Paris"))

    @respx.mock
    def test_shared_client(self, geocoding_payload: dict):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=geocoding_payload)
        )

        async def scenario():
            async with httpx.AsyncClient() as http:
                geo = GeocodingClient(
                    base_url="https://test-geo.example.com/v1", http=http
                )
                return await geo.search("Paris")

        assert len(asyncio.run(scenario())) == 6
