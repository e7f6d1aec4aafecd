"""Number formatting for serialized output. No engine imports."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_away(value: float, precision: int) -> Decimal:
    """Round to `precision` decimals, ties away from zero.

    Works on the shortest repr of the float, so 0.0005 rounds to 0.001 even
    though its binary value sits slightly below the tie.
    """
    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Integer digits plus kept decimals, so quantize never runs out of digits
        ctx.prec = max(exact.adjusted(), 0) + precision + 2
        quantum = Decimal(1).scaleb(-precision)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


def format_number(value: float, precision: int = 3) -> str:
    """Fixed-precision number text with trailing zeros stripped.

    1.5 → "1.5", 100.0 → "100", -0.0004 → "0".
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = f"{round_half_away(value, precision):f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_full(value: float) -> str:
    """Full-precision number text. Integral values print without a decimal part."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
