"""Tapered normalization and denormalization.

Maps between the unit interval and an arbitrary closed range through an
audio-style taper curve. A taper of 0.5 is linear; values towards 0 or 1 skew
the curve exponentially or logarithmically.

The curve is ``y = a * b**x - a`` with ``b = (1/taper - 1)**2`` and
``a = 1 / (b - 1)``, which passes through (0, 0) and (1, 1) and has value
``taper`` at ``x = 0.5``. See
https://electronics.stackexchange.com/questions/304692/formula-for-logarithmic-audio-taper-pot

With ``around_center=True`` the curve is folded: each half of the normalized
domain maps onto the matching half of the range, and the lower half is the
point reflection of the upper half about the midpoint.

Invalid tapers do not raise. ``denormalize`` returns the range's lower bound
and ``normalize`` returns 0.0. Out-of-domain inputs and degenerate ranges
propagate inf/nan.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from taperkit.core.numeric.precision import Real, float_type, narrow, quiet, widen
from taperkit.core.numeric.ranges import FloatRange

logger = logging.getLogger(__name__)

LINEAR_TAPER = 0.5

_UNIT_SPAN = (np.float64(0.0), np.float64(1.0))


def is_valid_taper(taper: float) -> bool:
    """Return True if ``0 < taper < 1`` (NaN is invalid)."""
    return bool(0.0 < taper < 1.0)


def _coefficients(taper: float) -> tuple[np.float64, np.float64]:
    b = (1.0 / widen(taper) - 1.0) ** 2
    a = 1.0 / (b - 1.0)
    return a, b


def _span(lower: Any, upper: Any) -> tuple[np.float64, np.float64]:
    return widen(lower), widen(upper - lower)


def _denormalize_unfolded(
    x: np.float64, span: tuple[np.float64, np.float64], taper: float
) -> np.float64:
    lower, size = span
    if taper == LINEAR_TAPER:
        return size * x + lower

    # Same curve as a * b**x - a, rearranged so that x = 0 and x = 1 give
    # exactly 0 and 1
    _, b = _coefficients(taper)
    y = (np.power(b, x) - 1.0) / (b - 1.0)
    return size * y + lower


def _normalize_unfolded(
    x: np.float64, span: tuple[np.float64, np.float64], taper: float
) -> np.float64:
    lower, size = span
    u = (x - lower) / size
    if taper == LINEAR_TAPER:
        return u

    a, b = _coefficients(taper)
    return np.log((u + a) / a) / np.log(b)


def denormalize(
    value: Real,
    rng: FloatRange,
    taper: float = LINEAR_TAPER,
    around_center: bool = False,
) -> Real:
    """Map a normalized value onto ``rng`` through the taper curve.

    Args:
        value: Normalized value, expected in [0, 1].
        rng: Destination range.
        taper: Curve shape, must satisfy 0 < taper < 1 (0.5 is linear).
        around_center: Apply the taper symmetrically around the range midpoint.

    Returns:
        Value on ``rng`` in the caller's floating type, or ``rng.lower`` if the
        taper is invalid.

    Example:
        >>> denormalize(0.5, FloatRange(0, 10))
        5.0
        >>> denormalize(0.5, FloatRange(-10, 10), taper=0.1, around_center=True)
        0.0
    """
    kind = float_type(value, rng.lower)
    if not is_valid_taper(taper):
        logger.debug("Taper %s outside (0, 1); denormalizing to lower bound %s", taper, rng.lower)
        return narrow(rng.lower, kind)

    x = widen(value)
    with quiet():
        if not around_center:
            result = _denormalize_unfolded(x, _span(rng.lower, rng.upper), taper)
        elif x >= 0.5:
            result = _denormalize_unfolded(2.0 * x - 1.0, _span(rng.midpoint, rng.upper), taper)
        else:
            warped = _denormalize_unfolded(1.0 - 2.0 * x, _UNIT_SPAN, taper)
            reflected = 1.0 - warped
            result = _denormalize_unfolded(reflected, _span(*rng.lower_half_bounds()), LINEAR_TAPER)
    return narrow(result, kind)


def normalize(
    value: Real,
    rng: FloatRange,
    taper: float = LINEAR_TAPER,
    around_center: bool = False,
) -> Real:
    """Map a value on ``rng`` back to [0, 1]; inverse of :func:`denormalize`.

    Args:
        value: Value on the source range.
        rng: Source range.
        taper: Curve shape, must satisfy 0 < taper < 1 (0.5 is linear).
        around_center: Apply the taper symmetrically around the range midpoint.

    Returns:
        Normalized value in the caller's floating type, or 0.0 if the taper is
        invalid.

    Example:
        >>> normalize(5.0, FloatRange(0, 10))
        0.5
    """
    kind = float_type(value, rng.lower)
    if not is_valid_taper(taper):
        logger.debug("Taper %s outside (0, 1); normalizing to 0.0", taper)
        return narrow(0.0, kind)

    x = widen(value)
    with quiet():
        if not around_center:
            result = _normalize_unfolded(x, _span(rng.lower, rng.upper), taper)
        else:
            mid = rng.midpoint
            if widen(mid) <= x <= widen(rng.upper):
                r = _normalize_unfolded(x, _span(mid, rng.upper), taper)
                result = (r + 1.0) / 2.0
            else:
                unmapped = _normalize_unfolded(x, _span(*rng.lower_half_bounds()), LINEAR_TAPER)
                reflected = 1.0 - unmapped
                unwarped = _normalize_unfolded(reflected, _UNIT_SPAN, taper)
                result = (unwarped - 1.0) / -2.0
    return narrow(result, kind)
