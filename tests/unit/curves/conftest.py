"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from taperkit.core.curves.taper_curve import TaperCurve


@pytest.fixture
def linear_curve() -> TaperCurve:
    """Linear curve over [0, 10]."""
    return TaperCurve(lower=0.0, upper=10.0)


@pytest.fixture
def audio_curve() -> TaperCurve:
    """Strongly exponential curve over the audible frequency range."""
    return TaperCurve(lower=20.0, upper=20000.0, taper=0.03)


@pytest.fixture
def folded_curve() -> TaperCurve:
    """Folded curve over [-10, 10]."""
    return TaperCurve(lower=-10.0, upper=10.0, taper=0.1, around_center=True)
