"""Default favorite locations shown on first start."""

from weathernow.config.schema import LocationConfig

DEFAULT_FAVORITES: list[LocationConfig] = [
    LocationConfig(name="Denver", lat=39.7392, lon=-104.9903),
    LocationConfig(name="Bali", lat=-8.4095, lon=115.1889),
    LocationConfig(name="Tokyo", lat=35.6762, lon=139.6503),
]
