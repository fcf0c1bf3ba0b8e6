"""Tests for decimal rounding and truncation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from taperkit.core.numeric.rounding import round_digits, trailing_digits, truncate_digits


class TestRoundDigits:
    """Tests for round_digits."""

    def test_half_rounds_up(self) -> None:
        """1.2350 rounds to 1.24."""
        assert round_digits(1.2350, 2) == 1.24

    def test_half_away_from_zero_for_negatives(self) -> None:
        """-1.235 rounds to -1.24."""
        assert round_digits(-1.235, 2) == -1.24

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [
            (1.005, 2, 1.01),
            (2.675, 2, 2.68),
            (0.125, 2, 0.13),
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
        ],
    )
    def test_decimal_boundaries(self, value: float, digits: int, expected: float) -> None:
        """Values that are not exact in binary still round on their decimal form."""
        assert round_digits(value, digits) == expected

    def test_rounds_down_below_half(self) -> None:
        """Digits below five round toward zero."""
        assert round_digits(1.2349, 2) == 1.23

    def test_negative_digits(self) -> None:
        """Negative digit counts round to tens, hundreds, ..."""
        assert round_digits(1250.0, -2) == 1300.0
        assert round_digits(1234.5, -1) == 1230.0

    def test_large_values(self) -> None:
        """Values beyond the default decimal precision still quantize."""
        assert round_digits(1e300, 2) == 1e300

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_passes_through(self, value: float) -> None:
        """Infinities are returned unchanged."""
        assert round_digits(value, 2) == value

    def test_nan_passes_through(self) -> None:
        """NaN is returned unchanged."""
        assert math.isnan(round_digits(math.nan, 2))

    def test_float32(self) -> None:
        """float32 values round on their own shortest decimal form."""
        result = round_digits(np.float32(1.235), 2)
        assert isinstance(result, np.float32)
        assert result == np.float32(1.24)


class TestTruncateDigits:
    """Tests for truncate_digits."""

    def test_truncates(self) -> None:
        """1.2399 truncates to 1.23."""
        assert truncate_digits(1.2399, 2) == 1.23

    def test_negative_values_floor(self) -> None:
        """Truncation moves toward negative infinity."""
        assert truncate_digits(-1.2301, 2) == -1.24

    def test_exact_value_unchanged(self) -> None:
        """Values already at the requested precision are kept."""
        assert truncate_digits(0.3, 1) == 0.3
        assert truncate_digits(-0.3, 1) == -0.3

    def test_zero_digits(self) -> None:
        """Zero digits truncates to a whole number."""
        assert truncate_digits(7.99, 0) == 7.0


class TestTrailingDigits:
    """Tests for trailing_digits."""

    def test_positive(self) -> None:
        """Fractional part of a positive value."""
        assert trailing_digits(3.75) == 0.75

    def test_whole_number(self) -> None:
        """Whole numbers have no trailing digits."""
        assert trailing_digits(12.0) == 0.0

    def test_negative(self) -> None:
        """Negative values are measured from the floor."""
        assert trailing_digits(-3.75) == 0.25
