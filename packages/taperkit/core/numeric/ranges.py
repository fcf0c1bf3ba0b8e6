"""Closed floating-point ranges and their derived quantities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


def _coerce_bounds(lower: Any, upper: Any) -> tuple[Any, Any]:
    # numpy scalars keep their width; everything else becomes a double
    if isinstance(lower, np.floating) or isinstance(upper, np.floating):
        kind = np.result_type(lower, upper).type
        return kind(lower), kind(upper)
    return float(lower), float(upper)


@dataclass(frozen=True)
class FloatRange:
    """Closed interval ``[lower, upper]`` over a single floating type.

    Bounds are coerced on construction: ints become ``float``, numpy floating
    scalars keep their type (mixed bounds follow numpy promotion).

    Attributes:
        lower: Lower bound (inclusive).
        upper: Upper bound (inclusive).

    Raises:
        ValueError: If ``lower > upper`` or either bound is NaN.

    Example:
        >>> rng = FloatRange(-10, 10)
        >>> rng.size, rng.midpoint
        (20.0, 0.0)
    """

    lower: Any
    upper: Any

    def __post_init__(self) -> None:
        lower, upper = _coerce_bounds(self.lower, self.upper)
        if not lower <= upper:
            raise ValueError(f"Range lower bound must not exceed upper bound, got [{lower}, {upper}]")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    @classmethod
    def from_tuple(cls, bounds: tuple[Any, Any]) -> FloatRange:
        """Build a range from a ``(lower, upper)`` pair."""
        lower, upper = bounds
        return cls(lower, upper)

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.lower, self.upper)

    @property
    def size(self) -> Any:
        """Difference between the upper and lower bounds."""
        return self.upper - self.lower

    @property
    def midpoint(self) -> Any:
        """Average of the upper and lower bounds."""
        return (self.lower + self.upper) / 2

    @property
    def upper_half(self) -> FloatRange:
        """Upper half of the range, midpoint included."""
        return FloatRange(self.midpoint, self.upper)

    @property
    def lower_half(self) -> FloatRange:
        """Lower half of the range, midpoint excluded.

        The upper bound is the largest representable value strictly below the
        midpoint, so the two halves are disjoint and together cover the range.

        Raises:
            ValueError: If the range is too small to have a lower half.
        """
        return FloatRange(*self.lower_half_bounds())

    def lower_half_bounds(self) -> tuple[Any, Any]:
        """Bounds of the lower half without validating them.

        For a range whose midpoint equals its lower bound the pair is inverted.
        """
        mid = self.midpoint
        kind = type(mid)
        return self.lower, kind(np.nextafter(mid, kind(-np.inf)))

    def contains(self, value: Any) -> bool:
        return bool(self.lower <= value <= self.upper)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"


UNIT_RANGE = FloatRange(0.0, 1.0)


def size(rng: FloatRange) -> Any:
    return rng.size


def midpoint(rng: FloatRange) -> Any:
    return rng.midpoint


def upper_half(rng: FloatRange) -> FloatRange:
    return rng.upper_half


def lower_half(rng: FloatRange) -> FloatRange:
    return rng.lower_half
