"""Tests for path data construction."""

from __future__ import annotations

import numpy as np

from superellipse.engine.sampler import superellipse_points
from superellipse.models.shape import Point
from superellipse.svg.path_builder import build_path


def test_empty_input():
    assert build_path([]) == ""
    assert build_path(np.empty((0, 2))) == ""


def test_single_point():
    assert build_path([(1, 2)]) == "M 1 2 Z"
    assert build_path([(1, 2)], close=False) == "M 1 2"


def test_square_path():
    pts = [Point(1, 0), Point(0, 1), Point(-1, 0), Point(0, -1)]
    assert build_path(pts) == "M 1 0 L 0 1 L -1 0 L 0 -1 Z"


def test_rounding_and_trailing_zeros():
    pts = [(1.23456, -7.5), (0.1 + 0.2, 2.0)]
    assert build_path(pts, close=False) == "M 1.235 -7.5 L 0.3 2"


def test_round_half_away_from_zero():
    assert build_path([(0.0005, -0.0005)], close=False) == "M 0.001 -0.001"
    assert build_path([(2.5, -2.5)], precision=0, close=False) == "M 3 -3"


def test_negative_zero_printed_as_zero():
    assert build_path([(-0.0001, -0.0)], close=False) == "M 0 0"


def test_precision_argument():
    pts = [(3.14159265, 2.71828183)]
    assert build_path(pts, precision=1, close=False) == "M 3.1 2.7"
    assert build_path(pts, precision=5, close=False) == "M 3.14159 2.71828"


def test_sampled_ellipse_path():
    d = build_path(superellipse_points(100, 50, 2, 4))
    assert d == "M 100 0 L 0 50 L -100 0 L 0 -50 Z"


def test_command_counts():
    segments = 37
    d = build_path(superellipse_points(10, 10, 3, segments))
    tokens = d.split()
    assert tokens.count("M") == 1
    assert tokens.count("L") == segments - 1
    assert tokens[-1] == "Z"


def test_precision_70():
    d = build_path(superellipse_points(10, 10, 2, 8), precision=70)
    tokens = d.split()
    assert tokens[:3] == ["M", "10", "0"]
    assert tokens[-1] == "Z"


def test_huge_semi_axis():
    d = build_path(superellipse_points(1e70, 1e70, 2, 4))
    assert d.startswith(f"M 1{'0' * 70} 0 L ")


def test_default_precision_from_config():
    from superellipse.engine.config import DEFAULT_CONFIG

    pts = [(1.123456789, 0.0)]
    expected = build_path(pts, precision=DEFAULT_CONFIG.path_precision, close=False)
    assert build_path(pts, close=False) == expected
