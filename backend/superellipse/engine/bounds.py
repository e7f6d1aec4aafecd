"""Bounds calculator: axis-aligned bounding box of the sampled curve."""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.engine.sampler import superellipse_points
from superellipse.models.shape import BoundingBox
from superellipse.utils.geometry import all_finite, bbox

logger = logging.getLogger(__name__)


def fallback_bounds(a: float, b: float) -> BoundingBox:
    return BoundingBox(min_x=-a, max_x=a, min_y=-b, max_y=b)


def bounds_of(points: NDArray[np.float64], a: float, b: float) -> BoundingBox:
    """Reduce min/max over `points`; {-a, a, -b, b} if empty or non-finite."""
    box = bbox(points)
    if box is None or not all_finite(box):
        logger.warning("Degenerate bounds for a=%g, b=%g; using fallback", a, b)
        return fallback_bounds(a, b)
    min_x, max_x, min_y, max_y = box
    return BoundingBox(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


def compute_bounds(a: float, b: float, n: float, segments: int | None = None) -> BoundingBox:
    """Bounding box from a fixed-density resample (256 segments by default)."""
    if segments is None:
        segments = DEFAULT_CONFIG.bounds_segments
    points = superellipse_points(a, b, n, segments)
    return bounds_of(points, a, b)
