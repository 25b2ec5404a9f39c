"""Sparkline geometry models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class CurveGeometry:
    points: tuple[Point, ...]
    min: float
    max: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Tooltip:
    index: int
    x: float
    y: float
    value: int
    label: str  # e.g. "12°"


@dataclass(frozen=True)
class PointLabel:
    x: float
    y: float
    text: str
    angle: float  # degrees, rotation around (x, y)
