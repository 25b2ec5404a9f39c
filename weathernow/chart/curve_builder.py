"""Sparkline curve builder: ordered samples -> scaled point set.

Horizontal scale is uniform: x_i = (i / (N - 1)) * width, with a single sample
centered. Vertical scale maps [min, max] onto the chart height minus a fixed
margin, split evenly above and below so points never touch the frame. A flat
series uses a span of 1 so no division by zero can occur.

The path drawn through these points (see weathernow.chart.svg) passes through
every sample exactly.
"""

from collections.abc import Sequence

from weathernow.models.chart import CurveGeometry, Point

DEFAULT_WIDTH = 260.0
DEFAULT_HEIGHT = 100.0
DEFAULT_MARGIN = 30.0


def build_curve(
    samples: Sequence[float],
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    margin: float = DEFAULT_MARGIN,
) -> CurveGeometry:
    """Scale samples into chart coordinates.

    Args:
        samples: Ordered values, e.g. the next 24 hourly temperatures.
        width: Chart width in px.
        height: Chart height in px.
        margin: Vertical inset reserved for point labels.

    Returns:
        CurveGeometry whose points[i] corresponds to samples[i]. Empty input
        returns an empty geometry, which callers must not render.
    """
    if not samples:
        return CurveGeometry(points=(), min=0.0, max=0.0, width=width, height=height)

    lo = min(samples)
    hi = max(samples)
    n = len(samples)
    points = tuple(
        Point(scale_x(i, n, width), scale_y(s, lo, hi, height, margin))
        for i, s in enumerate(samples)
    )
    return CurveGeometry(points=points, min=lo, max=hi, width=width, height=height)


def scale_x(index: int, count: int, width: float) -> float:
    if count == 1:
        return width / 2
    return (index / (count - 1)) * width


def scale_y(value: float, lo: float, hi: float, height: float, margin: float) -> float:
    span = (hi - lo) or 1
    return height - ((value - lo) / span) * (height - margin) - margin / 2
