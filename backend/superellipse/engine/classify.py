"""Human-readable label for a shape exponent."""

from __future__ import annotations


def describe_shape(n: float) -> str:
    """Classify the curve by its exponent. n == 2 is the ellipse."""
    if n < 0.5:
        return "sharp star"
    if n < 1:
        return "sharp diamond"
    if n < 1.5:
        return "rounded diamond"
    if n < 2:
        return "rounded square"
    if n == 2:
        return "ellipse"
    if n < 3:
        return "rounded rectangle"
    if n < 5:
        return "near rectangle"
    return "rectangle"
