"""SVG rendering of a CurveGeometry: stroke path, gradient area and labels."""

import math
from collections.abc import Sequence

from weathernow.models.chart import CurveGeometry, PointLabel
from weathernow.models.common import round_half_up

LABEL_OFFSET = 12.0


def _fmt(v: float) -> str:
    return f"{v:g}" if v == int(v) else f"{v:.3f}".rstrip("0")


def stroke_path(geometry: CurveGeometry) -> str:
    """Smooth interpolating path through every point.

    Each segment is a cubic whose two control points share the horizontal
    midpoint and keep the y of their own end, so the curve cannot overshoot
    the data range.
    """
    if geometry.is_empty:
        return ""
    pts = geometry.points
    parts = [f"M {_fmt(pts[0].x)},{_fmt(pts[0].y)}"]
    for prev, cur in zip(pts, pts[1:]):
        mid_x = (prev.x + cur.x) / 2
        parts.append(
            f"C {_fmt(mid_x)},{_fmt(prev.y)} {_fmt(mid_x)},{_fmt(cur.y)} "
            f"{_fmt(cur.x)},{_fmt(cur.y)}"
        )
    return " ".join(parts)


def area_path(geometry: CurveGeometry) -> str:
    """Stroke path closed down to the baseline, for gradient fill."""
    if geometry.is_empty:
        return ""
    w, h = _fmt(geometry.width), _fmt(geometry.height)
    return f"{stroke_path(geometry)} L {w},{h} L 0,{h} Z"


def segment_angle(geometry: CurveGeometry, index: int) -> float:
    """Slope in degrees of the segment ending at index (0 for the first point)."""
    if index <= 0 or index >= len(geometry):
        return 0.0
    prev, cur = geometry.points[index - 1], geometry.points[index]
    return math.degrees(math.atan2(cur.y - prev.y, cur.x - prev.x))


def point_labels(
    geometry: CurveGeometry,
    samples: Sequence[float],
    every: int = 4,
    offset: float = LABEL_OFFSET,
) -> list[PointLabel]:
    """Rounded value labels above every Nth point, tilted along the curve."""
    labels = []
    for i, (point, value) in enumerate(zip(geometry.points, samples)):
        if i % every:
            continue
        labels.append(PointLabel(
            x=point.x,
            y=point.y - offset,
            text=f"{round_half_up(value)}°",
            angle=segment_angle(geometry, i),
        ))
    return labels


def render_sparkline_svg(
    geometry: CurveGeometry,
    samples: Sequence[float],
    color: str = "#ffffff",
    label_every: int = 4,
) -> str:
    """Standalone SVG document for the sparkline."""
    w, h = _fmt(geometry.width), _fmt(geometry.height)
    out = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">',
    ]
    if not geometry.is_empty:
        out += [
            "<defs>",
            '<linearGradient id="tempGradient" x1="0" y1="0" x2="0" y2="1">',
            f'<stop offset="0%" stop-color="{color}" stop-opacity="0.6"/>',
            f'<stop offset="100%" stop-color="{color}" stop-opacity="0"/>',
            "</linearGradient>",
            "</defs>",
            f'<path d="{area_path(geometry)}" fill="url(#tempGradient)"/>',
            f'<path d="{stroke_path(geometry)}" fill="none" stroke="{color}" '
            'stroke-width="2" stroke-linecap="round" stroke-linejoin="round"/>',
        ]
        for p in geometry.points:
            out.append(f'<circle cx="{_fmt(p.x)}" cy="{_fmt(p.y)}" r="3" fill="{color}"/>')
        for label in point_labels(geometry, samples, every=label_every):
            x, y = _fmt(label.x), _fmt(label.y)
            out.append(
                f'<text x="{x}" y="{y}" font-size="11" text-anchor="middle" '
                f'fill="{color}" transform="rotate({label.angle:.2f}, {x}, {y})">'
                f"{label.text}</text>"
            )
    out.append("</svg>")
    return "\n".join(out)
