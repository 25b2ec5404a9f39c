"""Weather code + local hour -> classification key.

Rules are evaluated top to bottom and the first match wins:

1. snow codes
2. rain codes (including severe thunderstorm variants)
3. cloudy/fog codes
4. clear codes (never remapped to night)
5. daytime hours [6, 19) -> day
6. everything else -> night
"""

from weathernow.models.common import parse_local_time
from weathernow.models.forecast import WeatherSnapshot
from weathernow.models.theme import ClassificationKey

SNOW_CODES = frozenset({71})
RAIN_CODES = frozenset({61, 80, 95, 96, 99})
CLOUDY_CODES = frozenset({2, 3, 45, 48})
CLEAR_CODES = frozenset({0, 1})

DAY_START_HOUR = 6
NIGHT_START_HOUR = 19


def classify(weather_code: int, local_hour: int) -> ClassificationKey:
    if weather_code in SNOW_CODES:
        return ClassificationKey.SNOW
    if weather_code in RAIN_CODES:
        return ClassificationKey.RAIN
    if weather_code in CLOUDY_CODES:
        return ClassificationKey.CLOUDY
    if weather_code in CLEAR_CODES:
        return ClassificationKey.CLEAR
    if DAY_START_HOUR <= local_hour < NIGHT_START_HOUR:
        return ClassificationKey.DAY
    return ClassificationKey.NIGHT


def classify_snapshot(snapshot: WeatherSnapshot | None) -> ClassificationKey:
    """Classify current conditions, using the snapshot's local wall-clock hour.

    No snapshot (loading or failed fetch) maps to the neutral day theme.
    """
    if snapshot is None:
        return ClassificationKey.DAY
    ts = parse_local_time(snapshot.timestamp)
    hour = ts.hour if ts is not None else 12
    return classify(snapshot.weather_code, hour)
