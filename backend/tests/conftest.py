"""Shared test fixtures."""

from __future__ import annotations

import pytest

from superellipse.models.shape import RenderStyle, ShapeParameters


# Parameter sets spanning star, diamond, ellipse and near-rectangle shapes
SHAPE_CASES = [
    (100.0, 100.0, 0.3),
    (100.0, 60.0, 1.0),
    (80.0, 120.0, 1.5),
    (100.0, 100.0, 2.0),
    (150.0, 40.0, 3.0),
    (100.0, 100.0, 7.5),
    (10.0, 10.0, 50.0),
]

ELLIPSE = ShapeParameters(a=100, b=100, n=2, segments=256)

# Defaults used by the original generator UI
PREVIEW_STYLE = RenderStyle(
    stroke="#0969da",
    stroke_width=2,
    fill="#f6f8fa",
    width_px=300,
    height_px=300,
    padding=0,
)


@pytest.fixture
def ellipse_params() -> ShapeParameters:
    return ELLIPSE


@pytest.fixture
def preview_style() -> RenderStyle:
    return PREVIEW_STYLE
