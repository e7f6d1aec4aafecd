"""Area estimator: shoelace area of the densely sampled polygon."""

from __future__ import annotations

from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.engine.sampler import superellipse_points
from superellipse.utils.geometry import signed_area


def estimate_area(a: float, b: float, n: float, segments: int | None = None) -> float:
    """Enclosed area, always >= 0. Converges to the exact area as segments grow."""
    if segments is None:
        segments = DEFAULT_CONFIG.area_segments
    points = superellipse_points(a, b, n, segments)
    return abs(signed_area(points))
