"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1"
FORECAST_BASE_URL = "https://api.open-meteo.com/v1"


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    country: str | None = None


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = GEOCODING_BASE_URL
    forecast_url: str = FORECAST_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    language: str = "en"
    suggestion_count: int = Field(default=6, ge=1, le=100)


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid"}

    debounce_ms: int = Field(default=300, ge=0)


class ChartConfig(BaseModel):
    model_config = {"extra": "forbid"}

    width: float = Field(default=260.0, gt=0.0)
    height: float = Field(default=100.0, gt=0.0)
    margin: float = Field(default=30.0, ge=0.0)
    label_every: int = Field(default=4, ge=1)
    hours: int = Field(default=24, ge=1, le=384)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_count: int = Field(default=12, ge=1)
    daily_count: int = Field(default=7, ge=1, le=16)


class WeatherNowConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    search: SearchConfig = SearchConfig()
    chart: ChartConfig = ChartConfig()
    display: DisplayConfig = DisplayConfig()
    default_location: LocationConfig = LocationConfig(
        name="San Francisco", lat=37.7749, lon=-122.4194, country="US"
    )
    favorites: list[LocationConfig] = []
