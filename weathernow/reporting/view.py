"""Render-ready dashboard view built from the current state.

Everything a front end needs is computed here: the theme, current-condition
strings, the hourly strip, the daily outlook and the sparkline geometry with
its SVG paths. Missing data becomes placeholders, never errors.
"""

from dataclasses import asdict, dataclass, field

from weathernow.chart.curve_builder import build_curve
from weathernow.chart.svg import area_path, point_labels, stroke_path
from weathernow.config.schema import WeatherNowConfig
from weathernow.models.chart import CurveGeometry, PointLabel
from weathernow.models.theme import ClassificationKey, Theme
from weathernow.reporting.formatters import (
    PLACEHOLDER,
    format_clock,
    format_degrees,
    format_hour_label,
    format_percent,
    format_share_text,
    format_temperature,
    format_weekday,
    format_wind,
)
from weathernow.state.dashboard_state import DashboardState
from weathernow.theming.classifier import classify_snapshot
from weathernow.theming.icons import UNKNOWN_CONDITION, icon_for
from weathernow.theming.themes import theme_for


@dataclass(frozen=True)
class HourView:
    label: str
    icon: str
    emoji: str
    temperature: str
    precipitation: str


@dataclass(frozen=True)
class DayView:
    weekday: str
    icon: str
    emoji: str
    sunrise: str
    sunset: str
    high: str
    low: str


@dataclass(frozen=True)
class SparklineView:
    samples: tuple[float, ...]
    geometry: CurveGeometry
    stroke: str
    area: str
    labels: tuple[PointLabel, ...]


@dataclass(frozen=True)
class DashboardView:
    location: str
    classification: ClassificationKey
    theme: Theme
    temperature: str
    icon: str
    emoji: str
    condition: str
    feels_like: str
    wind: str
    humidity: str
    updated: str
    loading: bool
    share_text: str
    sparkline: SparklineView | None
    timezone: str = ""
    hours: tuple[HourView, ...] = ()
    days: tuple[DayView, ...] = ()
    favorites: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return asdict(self)


def hourly_samples(state: DashboardState, hours: int) -> tuple[float, ...]:
    forecast = state.forecast
    if forecast is None or forecast.hourly is None:
        return ()
    return tuple(t for t in forecast.hourly.temperature[:hours] if t is not None)


def build_sparkline(
    samples: tuple[float, ...], config: WeatherNowConfig
) -> SparklineView | None:
    if not samples:
        return None
    chart = config.chart
    geometry = build_curve(samples, chart.width, chart.height, chart.margin)
    return SparklineView(
        samples=samples,
        geometry=geometry,
        stroke=stroke_path(geometry),
        area=area_path(geometry),
        labels=tuple(point_labels(geometry, samples, every=chart.label_every)),
    )


def build_dashboard_view(
    state: DashboardState, config: WeatherNowConfig
) -> DashboardView:
    forecast = state.forecast
    current = forecast.current if forecast else None
    hourly = forecast.hourly if forecast else None
    daily = forecast.daily if forecast else None

    key = classify_snapshot(current)
    condition = icon_for(current.weather_code) if current else None

    hours = []
    if hourly is not None:
        for i in range(min(config.display.hourly_count, len(hourly))):
            cond = icon_for(hourly.weather_code[i])
            hours.append(HourView(
                label=format_hour_label(hourly.time[i]),
                icon=cond.icon.value,
                emoji=cond.emoji,
                temperature=format_degrees(hourly.temperature[i]),
                precipitation=format_percent(hourly.precipitation[i]),
            ))

    days = []
    if daily is not None:
        for i in range(min(config.display.daily_count, len(daily))):
            cond = icon_for(daily.weather_code[i])
            days.append(DayView(
                weekday=format_weekday(daily.time[i]),
                icon=cond.icon.value,
                emoji=cond.emoji,
                sunrise=format_clock(daily.sunrise[i]),
                sunset=format_clock(daily.sunset[i]),
                high=format_degrees(daily.temp_max[i]),
                low=format_degrees(daily.temp_min[i]),
            ))

    first_hour_temp = hourly.temperature[0] if hourly is not None and len(hourly) else None
    first_hour_humidity = hourly.humidity[0] if hourly is not None and len(hourly) else None
    label = condition.label if condition else ""

    return DashboardView(
        location=state.location.name,
        classification=key,
        theme=theme_for(key),
        temperature=format_temperature(current.temperature if current else None),
        icon=(condition or UNKNOWN_CONDITION).icon.value,
        emoji=condition.emoji if condition else PLACEHOLDER,
        condition=label if current else "Loading",
        feels_like=format_temperature(first_hour_temp) if first_hour_temp is not None else PLACEHOLDER,
        wind=format_wind(current.wind_speed if current else None),
        humidity=format_percent(first_hour_humidity),
        updated=format_clock(current.timestamp) if current else PLACEHOLDER,
        loading=state.loading,
        share_text=format_share_text(
            state.location.name, current.temperature if current else None, label
        ),
        sparkline=build_sparkline(hourly_samples(state, config.chart.hours), config),
        timezone=forecast.timezone if forecast else "",
        hours=tuple(hours),
        days=tuple(days),
        favorites=tuple(f.name for f in state.favorites),
    )


def format_dashboard_text(view: DashboardView) -> str:
    """Plain text rendering of the dashboard for terminals and logs."""
    lines = [
        f"=== {view.location} ({view.classification.value}) ===",
        f"{view.emoji} {view.temperature} {view.condition}".rstrip(),
        f"Feels {view.feels_like} | Wind {view.wind} | Humidity {view.humidity}",
    ]
    if view.hours:
        lines.append("Hourly:")
        lines.append("  " + "  ".join(
            f"{h.label} {h.emoji} {h.temperature} {h.precipitation}" for h in view.hours
        ))
    if view.days:
        lines.append("Daily:")
        for d in view.days:
            lines.append(
                f"  {d.weekday} {d.emoji}  {d.sunrise} · {d.sunset}  {d.high} / {d.low}"
            )
    zone = f" ({view.timezone})" if view.timezone else ""
    lines.append(f"Updated: {view.updated}{zone}")
    if view.loading:
        lines.append("Loading…")
    return "\n".join(lines)
