"""Decimal-accurate rounding and truncation.

Values go through their shortest round-tripping decimal string and are
quantized with :mod:`decimal`, so ``1.235`` rounds to ``1.24`` even though the
nearest double is slightly below 1.235.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext

import numpy as np

from taperkit.core.numeric.precision import Real, float_type, narrow


def _quantize(value: Real, digits: int, rounding: str) -> Real:
    kind = float_type(value)
    if not np.isfinite(value):
        return narrow(value, kind)

    exact = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        quantized = exact.quantize(Decimal(1).scaleb(-digits), rounding=rounding)
    return narrow(float(quantized), kind)


def round_digits(value: Real, digits: int) -> Real:
    """Round to ``digits`` fractional digits, halves away from zero.

    Args:
        value: Value to round
        digits: Number of fractional digits (negative rounds to tens, hundreds, ...)

    Returns:
        Rounded value in the caller's floating type

    Example:
        >>> round_digits(1.235, 2)
        1.24
        >>> round_digits(-1.235, 2)
        -1.24
    """
    return _quantize(value, digits, ROUND_HALF_UP)


def truncate_digits(value: Real, digits: int) -> Real:
    """Truncate to ``digits`` fractional digits, toward negative infinity.

    Example:
        >>> truncate_digits(1.2399, 2)
        1.23
        >>> truncate_digits(-1.2301, 2)
        -1.24
    """
    return _quantize(value, digits, ROUND_FLOOR)


def trailing_digits(value: Real) -> Real:
    """Fractional part left over after truncating to a whole number."""
    return value - truncate_digits(value, 0)
