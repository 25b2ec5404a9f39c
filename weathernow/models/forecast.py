"""Forecast data models: current conditions plus hourly/daily series.

Hourly and daily series are parallel arrays: index i across every field
describes the same hour (or day). Construction fails with ValueError when the
arrays disagree in length.
"""

from dataclasses import dataclass, fields
from typing import Any


def _check_parallel(series: Any) -> None:
    lengths = {f.name: len(getattr(series, f.name)) for f in fields(series)}
    if len(set(lengths.values())) > 1:
        raise ValueError(
            f"{type(series).__name__} arrays differ in length: {lengths}"
        )


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature: float | None
    wind_speed: float
    weather_code: int
    timestamp: str  # local wall time, e.g. "2026-02-11T14:00"


@dataclass(frozen=True)
class HourlySeries:
    time: tuple[str, ...]
    temperature: tuple[float | None, ...]
    precipitation: tuple[float, ...]
    weather_code: tuple[int, ...]
    humidity: tuple[float | None, ...]

    def __post_init__(self) -> None:
        _check_parallel(self)

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class DailySeries:
    time: tuple[str, ...]
    temp_max: tuple[float | None, ...]
    temp_min: tuple[float | None, ...]
    weather_code: tuple[int, ...]
    sunrise: tuple[str, ...]
    sunset: tuple[str, ...]

    def __post_init__(self) -> None:
        _check_parallel(self)

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class Forecast:
    current: WeatherSnapshot | None
    hourly: HourlySeries | None
    daily: DailySeries | None
    timezone: str = ""  # IANA name resolved by the provider
