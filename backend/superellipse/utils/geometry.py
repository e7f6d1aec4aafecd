"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def sign_power(values: NDArray[np.float64], exponent: float) -> NDArray[np.float64]:
    """sign(v) * |v|^exponent. Real-valued for negative v and fractional exponents."""
    return np.sign(values) * np.abs(values) ** exponent


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the closed polygon. Positive = CCW, Negative = CW.

    The last point connects back to the first; the input must not repeat it.
    """
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float] | None:
    """Compute (xmin, xmax, ymin, ymax), or None for an empty point set."""
    if len(points) == 0:
        return None
    return (
        float(np.min(points[:, 0])),
        float(np.max(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 1])),
    )


def all_finite(values: tuple[float, ...]) -> bool:
    return bool(np.all(np.isfinite(values)))
