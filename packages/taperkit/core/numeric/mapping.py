"""Clamping and linear mapping between ranges."""

from __future__ import annotations

from taperkit.core.numeric.precision import Real, float_type, narrow, quiet, widen
from taperkit.core.numeric.ranges import FloatRange


def clamp(value: Real, rng: FloatRange) -> Real:
    """Clamp value to ``rng``.

    Args:
        value: Value to clamp
        rng: Range on which to clamp

    Returns:
        Clamped value

    Example:
        >>> clamp(12.0, FloatRange(0, 10))
        10.0
    """
    return min(max(value, rng.lower), rng.upper)


def linear_map(value: Real, src: FloatRange, dst: FloatRange) -> Real:
    """Linearly map a value from one range to another.

    A zero-size source range yields a non-finite result instead of raising.

    Args:
        value: Value on the source range
        src: Source range
        dst: Destination range

    Returns:
        Value on the destination range, in the caller's floating type

    Example:
        >>> linear_map(5.0, FloatRange(0, 10), FloatRange(100, 200))
        150.0
    """
    kind = float_type(value, dst.lower, src.lower)
    with quiet():
        x = widen(value)
        mapped = (x - widen(src.lower)) / widen(src.size) * widen(dst.size) + widen(dst.lower)
    return narrow(mapped, kind)
