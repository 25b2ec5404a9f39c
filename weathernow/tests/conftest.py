"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weathernow.config.defaults import DEFAULT_FAVORITES
from weathernow.config.schema import WeatherNowConfig
from weathernow.ingest.forecast_fetcher import parse_forecast
from weathernow.models.forecast import Forecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class FakeHandle:
    def __init__(self, when: float, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock standing in for loop.call_later."""

    def __init__(self):
        self.now = 0.0
        self.handles: list[FakeHandle] = []

    def call_later(self, delay: float, callback) -> FakeHandle:
        handle = FakeHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def active(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted(
            (h for h in self.active if h.when <= self.now), key=lambda h: h.when
        )
        for h in due:
            self.handles.remove(h)
            h.callback()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def default_config() -> WeatherNowConfig:
    """Return default WeatherNowConfig with default favorites."""
    return WeatherNowConfig(favorites=DEFAULT_FAVORITES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "search": {"debounce_ms": 250},
        "chart": {"width": 200.0, "height": 80.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "forecast_denver.json") as f:
        return json.load(f)


@pytest.fixture
def geocoding_payload() -> dict:
    with open(FIXTURE_DIR / "geocoding_paris.json") as f:
        return json.load(f)


@pytest.fixture
def forecast(forecast_payload: dict) -> Forecast:
    return parse_forecast(forecast_payload)
