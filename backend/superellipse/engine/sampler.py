"""Curve sampler: parametric points on the Lamé curve |x/a|^n + |y/b|^n = 1.

x(t) = sign(cos t) * |cos t|^(2/n) * a
y(t) = sign(sin t) * |sin t|^(2/n) * b

for t_i = 2π·i/N, i = 0..N-1. The endpoint t = 2π is not emitted; consumers
close the loop themselves.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.engine.errors import InvalidParameter
from superellipse.models.shape import Point
from superellipse.utils.geometry import sign_power

logger = logging.getLogger(__name__)


def _require_positive(name: str, value: float) -> None:
    # `not value > 0` also rejects NaN
    if not value > 0:
        raise InvalidParameter(name, f"{name} must be greater than 0, got {value!r}")


def validate_parameters(a: float, b: float, n: float) -> None:
    """Raise InvalidParameter for the first of a, b, n that is not positive."""
    _require_positive("a", a)
    _require_positive("b", b)
    _require_positive("n", n)


def clamp_segments(segments: float) -> int:
    """Floor to an integer with a minimum of 4. No upper cap."""
    return max(DEFAULT_CONFIG.min_segments, math.floor(segments))


def superellipse_points(
    a: float,
    b: float,
    n: float,
    segments: float = DEFAULT_CONFIG.sample_segments,
) -> NDArray[np.float64]:
    """Sample the superellipse boundary as an (N, 2) array in increasing-t order."""
    validate_parameters(a, b, n)
    count = clamp_segments(segments)
    exponent = 2.0 / n

    t = (np.arange(count, dtype=np.float64) / count) * 2.0 * np.pi
    # Extreme exponents may underflow to 0; that is the expected limit shape
    with np.errstate(all="ignore"):
        x = sign_power(np.cos(t), exponent) * a
        y = sign_power(np.sin(t), exponent) * b

    logger.debug("Sampled %d points (a=%g, b=%g, n=%g)", count, a, b, n)
    return np.column_stack((x, y))


def to_points(points: NDArray[np.float64]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in points]
