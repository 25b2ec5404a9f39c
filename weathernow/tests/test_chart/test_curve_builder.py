"""Tests for the sparkline curve builder."""

import math

import pytest

from weathernow.chart.curve_builder import build_curve
from weathernow.chart.svg import stroke_path


class TestBuildCurve:
    def test_empty_input(self):
        geom = build_curve([], 260, 100)
        assert geom.is_empty
        assert len(geom) == 0

    def test_pass_through(self):
        # min 0, max 10: y = 100 - s / 10 * 70 - 15
        geom = build_curve([0.0, 5.0, 10.0, 2.5, 7.5], 200, 100, margin=30)
        assert [(p.x, p.y) for p in geom.points] == [
            (0.0, 85.0), (50.0, 50.0), (100.0, 15.0), (150.0, 67.5), (200.0, 32.5),
        ]

    def test_stroke_path_ends_on_samples(self):
        geom = build_curve([0.0, 5.0, 10.0, 2.5, 7.5], 200, 100, margin=30)
        assert stroke_path(geom) == (
            "M 0,85 C 25,85 25,50 50,50 C 75,50 75,15 100,15 "
            "C 125,15 125,67.5 150,67.5 C 175,67.5 175,32.5 200,32.5"
        )

    def test_extremes_sit_inside_margin(self):
        geom = build_curve([0.0, 10.0], 260, 100, margin=30)
        # max at top inset, min at bottom inset
        assert geom.points[1].y == pytest.approx(15.0)
        assert geom.points[0].y == pytest.approx(85.0)

    def test_x_spans_full_width(self):
        geom = build_curve([1.0, 2.0, 3.0, 4.0, 5.0], 200, 80)
        xs = [p.x for p in geom.points]
        assert xs == [0.0, 50.0, 100.0, 150.0, 200.0]

    def test_min_max_recorded(self):
        geom = build_curve([3.0, -1.0, 8.0], 100, 50)
        assert geom.min == -1.0
        assert geom.max == 8.0

    def test_flat_series_is_finite(self):
        geom = build_curve([5.0] * 24, 260, 100, margin=30)
        for p in geom.points:
            assert math.isfinite(p.x) and math.isfinite(p.y)
        assert {p.y for p in geom.points} == {85.0}

    def test_single_point_centered(self):
        geom = build_curve([7.0], 260, 100)
        assert len(geom) == 1
        assert geom.points[0].x == 130.0
        assert math.isfinite(geom.points[0].y)

    def test_deterministic(self):
        samples = [0.1, 0.2, 0.30000000000000004, 17.5, -3.25]
        assert build_curve(samples, 260, 100) == build_curve(list(samples), 260, 100)
