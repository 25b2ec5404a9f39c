"""Display formatters for dashboard values and placeholders."""

from weathernow.models.common import parse_local_time, round_half_up

PLACEHOLDER = "—"
TEMPERATURE_PLACEHOLDER = "--°C"


def format_temperature(value: float | None, unit: str = "°C") -> str:
    if value is None:
        return TEMPERATURE_PLACEHOLDER
    return f"{round_half_up(value)}{unit}"


def format_degrees(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{round_half_up(value)}°"


def format_wind(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{round_half_up(value)} km/h"


def format_percent(value: float | None) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{round_half_up(value)}%"


def format_hour_label(timestamp: str) -> str:
    """12-hour clock label: "12 AM", "9 AM", "12 PM", "3 PM"."""
    dt = parse_local_time(timestamp)
    if dt is None:
        return PLACEHOLDER
    hour = dt.hour
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    return f"{12 if hour == 12 else hour - 12} PM"


def format_clock(timestamp: str) -> str:
    """Local "HH:MM", or a placeholder when the timestamp is missing."""
    dt = parse_local_time(timestamp)
    if dt is None:
        return PLACEHOLDER
    return dt.strftime("%H:%M")


def format_weekday(date: str) -> str:
    dt = parse_local_time(date)
    if dt is None:
        return PLACEHOLDER
    return dt.strftime("%a")


def format_share_text(
    location_name: str, temperature: float | None, label: str
) -> str:
    """One-line summary suitable for copying to the clipboard."""
    condition = f" {label}" if label else ""
    return f"{location_name}: {format_temperature(temperature)}{condition}"
