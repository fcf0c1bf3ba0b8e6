"""Floating-point range, mapping, taper and rounding utilities."""

from taperkit.core.numeric.mapping import clamp, linear_map
from taperkit.core.numeric.ranges import (
    UNIT_RANGE,
    FloatRange,
    lower_half,
    midpoint,
    size,
    upper_half,
)
from taperkit.core.numeric.rounding import round_digits, trailing_digits, truncate_digits
from taperkit.core.numeric.taper import LINEAR_TAPER, denormalize, is_valid_taper, normalize

__all__ = [
    "FloatRange",
    "LINEAR_TAPER",
    "UNIT_RANGE",
    "clamp",
    "denormalize",
    "is_valid_taper",
    "linear_map",
    "lower_half",
    "midpoint",
    "normalize",
    "round_digits",
    "size",
    "trailing_digits",
    "truncate_digits",
    "upper_half",
]
