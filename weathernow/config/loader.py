"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml

from weathernow.config.defaults import DEFAULT_FAVORITES
from weathernow.config.schema import LocationConfig, WeatherNowConfig
from weathernow.models.location import Location


def load_config(path: str | Path | None = None) -> WeatherNowConfig:
    """Load and validate config from a YAML file.

    A missing path yields the built-in defaults. If no favorites are specified
    in the YAML, injects DEFAULT_FAVORITES.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    if "favorites" not in raw or not raw["favorites"]:
        raw["favorites"] = [f.model_dump() for f in DEFAULT_FAVORITES]

    return WeatherNowConfig(**raw)


def to_location(cfg: LocationConfig) -> Location:
    return Location(name=cfg.name, lat=cfg.lat, lon=cfg.lon, country=cfg.country)


def get_config_value(config: WeatherNowConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'search.debounce_ms'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(
    config: WeatherNowConfig, dotted_key: str, value: Any
) -> WeatherNowConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new WeatherNowConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target.get(parts[-1])
    if isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return WeatherNowConfig(**data)


def save_config(config: WeatherNowConfig, path: str | Path) -> None:
    """Write config back to YAML."""
    with open(path, "w") as f:
        yaml.safe_dump(json.loads(config.model_dump_json()), f, sort_keys=False)
