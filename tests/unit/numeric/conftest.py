"""Shared pytest fixtures for numeric tests."""

from __future__ import annotations

import pytest

from taperkit.core.numeric.ranges import FloatRange

TAPERS = [0.1, 0.3, 0.5, 0.7, 0.9]


@pytest.fixture
def unit_samples() -> list[float]:
    """100 evenly spaced samples covering [0, 1]."""
    return [i / 99 for i in range(100)]


@pytest.fixture(params=[(0.0, 1.0), (-10.0, 10.0), (20.0, 20000.0), (-3.5, -0.25)])
def any_range(request: pytest.FixtureRequest) -> FloatRange:
    """A selection of ranges: unit, symmetric, wide positive, all-negative."""
    return FloatRange(*request.param)


@pytest.fixture(params=TAPERS)
def taper(request: pytest.FixtureRequest) -> float:
    """Valid tapers from strongly logarithmic to strongly exponential."""
    return request.param
