"""Tests for pydantic config validation."""

import pytest
from pydantic import ValidationError

from weathernow.config.schema import (
    ChartConfig,
    LocationConfig,
    SearchConfig,
    WeatherNowConfig,
)


class TestSchema:
    def test_defaults(self):
        config = WeatherNowConfig()
        assert config.search.debounce_ms == 300
        assert config.api.suggestion_count == 6
        assert (config.chart.width, config.chart.height) == (260.0, 100.0)
        assert config.display.hourly_count == 12
        assert config.display.daily_count == 7

    def test_extra_keys_forbidden(self):
        with pytest.raises(ValidationError):
            WeatherNowConfig(theme="dark")
        with pytest.raises(ValidationError):
            SearchConfig(debounce_ms=300, jitter=5)

    def test_negative_debounce_rejected(self):
        with pytest.raises(ValidationError):
            SearchConfig(debounce_ms=-1)

    def test_zero_width_rejected(self):
        with pytest.raises(ValidationError):
            ChartConfig(width=0)

    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            LocationConfig(name="Bad", lat=91.0, lon=0.0)
