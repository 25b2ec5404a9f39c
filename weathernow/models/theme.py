"""Classification keys, visual themes and weather icon models."""

from dataclasses import dataclass
from enum import StrEnum


class ClassificationKey(StrEnum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    DAY = "day"
    NIGHT = "night"


class IconId(StrEnum):
    CLEAR = "clear"
    MAINLY_CLEAR = "mainly-clear"
    PARTLY_CLOUDY = "partly-cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    SHOWERS = "showers"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Theme:
    background_style: str
    curve_color: str
    tooltip_style: str
    favorite_button_style: str


@dataclass(frozen=True)
class WeatherCondition:
    icon: IconId
    label: str
    emoji: str
