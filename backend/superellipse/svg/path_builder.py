"""Closed polyline path data from a point sequence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from superellipse.engine.config import DEFAULT_CONFIG
from superellipse.utils.math_helpers import format_number


def build_path(
    points: Iterable[Sequence[float]],
    precision: int = DEFAULT_CONFIG.path_precision,
    close: bool = True,
) -> str:
    """Build `M x y L x y ... Z` path data.

    Accepts an (N, 2) array or any sequence of (x, y) pairs. Empty input
    gives "".
    """
    commands: list[str] = []
    for x, y in points:
        op = "L" if commands else "M"
        commands.append(f"{op} {format_number(x, precision)} {format_number(y, precision)}")

    if not commands:
        return ""
    if close:
        commands.append("Z")
    return " ".join(commands)
