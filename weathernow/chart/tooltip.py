"""Pointer position -> nearest sample tooltip."""

from collections.abc import Sequence

from weathernow.models.chart import CurveGeometry, Tooltip
from weathernow.models.common import round_half_up


def resolve_tooltip(
    pointer_x: float,
    geometry: CurveGeometry,
    samples: Sequence[float],
    pointer_y: float | None = None,
) -> Tooltip | None:
    """Map a pointer offset inside the chart box to the nearest sample.

    Inverts the uniform horizontal scale, so no search over the points is
    needed. Returns None when the pointer is outside the box (the caller must
    clear any tooltip it was showing) or there is nothing to point at.
    """
    if geometry.is_empty or len(samples) != len(geometry):
        return None
    if not 0 <= pointer_x <= geometry.width:
        return None
    if pointer_y is not None and not 0 <= pointer_y <= geometry.height:
        return None

    n = len(geometry)
    if n == 1 or geometry.width == 0:
        index = 0
    else:
        index = round_half_up((pointer_x / geometry.width) * (n - 1))
        index = max(0, min(n - 1, index))

    point = geometry.points[index]
    value = round_half_up(samples[index])
    return Tooltip(index=index, x=point.x, y=point.y, value=value, label=f"{value}°")
