"""Working-precision helpers.

Numeric functions compute in double precision and hand results back in the
floating type the caller supplied (Python ``float`` or a numpy floating
scalar such as ``np.float32``).
"""

from __future__ import annotations

from typing import Any, TypeVar

import numpy as np

Real = TypeVar("Real", float, np.floating)


def float_type(*values: Any) -> type:
    """Return the floating type a computation over ``values`` should yield.

    The first numpy floating scalar wins; anything else falls back to ``float``.

    Example:
        >>> float_type(np.float32(1.0), 2.0)
        <class 'numpy.float32'>
        >>> float_type(1, 2.0)
        <class 'float'>
    """
    for value in values:
        if isinstance(value, np.floating):
            return type(value)
    return float


def widen(value: Any) -> np.float64:
    """Promote a scalar to double precision."""
    return np.float64(value)


def narrow(value: Any, kind: type) -> Any:
    """Cast a double-precision result back to ``kind``."""
    if kind is float:
        return float(value)
    return kind(value)


def quiet() -> np.errstate:
    """Context manager that lets inf/nan propagate without runtime warnings."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore")
