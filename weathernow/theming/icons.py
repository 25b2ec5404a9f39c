"""Raw weather code -> display icon lookup with an explicit fallback."""

from types import MappingProxyType

from weathernow.models.theme import IconId, WeatherCondition

UNKNOWN_CONDITION = WeatherCondition(icon=IconId.UNKNOWN, label="", emoji="🌥")

CONDITIONS = MappingProxyType({
    0: WeatherCondition(IconId.CLEAR, "Clear", "☀️"),
    1: WeatherCondition(IconId.MAINLY_CLEAR, "Mainly clear", "🌤"),
    2: WeatherCondition(IconId.PARTLY_CLOUDY, "Partly cloudy", "⛅"),
    3: WeatherCondition(IconId.OVERCAST, "Overcast", "☁️"),
    45: WeatherCondition(IconId.FOG, "Fog", "🌫"),
    48: WeatherCondition(IconId.FOG, "Rime fog", "🌫"),
    51: WeatherCondition(IconId.DRIZZLE, "Drizzle", "🌦"),
    61: WeatherCondition(IconId.RAIN, "Rain", "🌧"),
    71: WeatherCondition(IconId.SNOW, "Snow", "🌨"),
    80: WeatherCondition(IconId.SHOWERS, "Showers", "🌦"),
    95: WeatherCondition(IconId.THUNDERSTORM, "Thunderstorm", "⛈"),
    96: WeatherCondition(IconId.THUNDERSTORM, "Thunderstorm with hail", "⛈"),
    99: WeatherCondition(IconId.THUNDERSTORM, "Thunderstorm with heavy hail", "⛈"),
})


def icon_for(weather_code: int) -> WeatherCondition:
    """Look up the display condition for a code; unmapped codes get UNKNOWN_CONDITION."""
    return CONDITIONS.get(weather_code, UNKNOWN_CONDITION)
