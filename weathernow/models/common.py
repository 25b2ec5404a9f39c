"""Common types and helpers shared across models."""

import math
from datetime import datetime


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def parse_local_time(value: str) -> datetime | None:
    """Parse a provider wall-clock timestamp like "2026-02-11T14:00"."""
    try:
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
