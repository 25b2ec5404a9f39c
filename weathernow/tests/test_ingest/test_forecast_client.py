"""Tests for the forecast API client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from weathernow.ingest.forecast_client import ForecastClient

FORECAST_URL = "https://test-forecast.example.com/v1/forecast"


@pytest.fixture
def client() -> ForecastClient:
    return ForecastClient(base_url="https://test-forecast.example.com/v1", timeout=1.0)


class TestGetForecast:
    @respx.mock
    def test_success(self, client: ForecastClient, forecast_payload: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        result = asyncio.run(client.get_forecast(39.7392, -104.9903))
        assert result["current_weather"]["weathercode"] == 2
        assert len(result["hourly"]["time"]) == 16

    @respx.mock
    def test_request_params(self, client: ForecastClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        asyncio.run(client.get_forecast(39.7392, -104.9903))
        params = route.calls[0].request.url.params
        assert params["latitude"] == "39.7392"
        assert params["longitude"] == "-104.9903"
        assert params["current_weather"] == "true"
        assert params["timezone"] == "auto"
        assert "relativehumidity_2m" in params["hourly"].split(",")
        assert set(params["daily"].split(",")) == {
            "temperature_2m_max", "temperature_2m_min", "sunrise", "sunset", "weathercode",
        }

    @respx.mock
    def test_no_retry_on_503(self, client: ForecastClient):
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(client.get_forecast(0.0, 0.0))
        assert route.call_count == 1

    @respx.mock
    def test_timeout_raises(self, client: ForecastClient):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(httpx.RequestError):
            asyncio.run(client.get_forecast(0.0, 0.0))
