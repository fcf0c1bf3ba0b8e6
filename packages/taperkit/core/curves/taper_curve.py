"""Validated taper curve model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from taperkit.core.curves.models import CurvePoint
from taperkit.core.curves.sampling import sample_unit_interval
from taperkit.core.numeric.ranges import FloatRange
from taperkit.core.numeric.taper import LINEAR_TAPER, denormalize, normalize

if TYPE_CHECKING:
    from taperkit.core.config.models import TaperDefaults


class TaperCurve(BaseModel):
    """A taper curve bound to a destination range.

    Unlike the module-level functions in :mod:`taperkit.core.numeric.taper`,
    construction rejects an invalid taper instead of silently degrading.

    Attributes:
        lower: Lower bound of the destination range.
        upper: Upper bound of the destination range.
        taper: Curve shape, 0 < taper < 1 (0.5 is linear).
        around_center: Fold the curve symmetrically around the range midpoint.

    Example:
        >>> curve = TaperCurve(lower=20.0, upper=20000.0, taper=0.03)
        >>> round(curve.normalize(curve.denormalize(0.1)), 6)
        0.1
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    lower: float = Field(..., description="Lower bound of the destination range")
    upper: float = Field(..., description="Upper bound of the destination range")
    taper: float = Field(default=LINEAR_TAPER, gt=0.0, lt=1.0, description="Curve shape (0.5 = linear)")
    around_center: bool = Field(default=False, description="Fold around the range midpoint")

    @model_validator(mode="after")
    def _validate_bounds(self) -> TaperCurve:
        if not self.lower <= self.upper:
            raise ValueError(f"lower ({self.lower}) must be <= upper ({self.upper})")
        return self

    @classmethod
    def from_config(cls, lower: float, upper: float, defaults: TaperDefaults) -> TaperCurve:
        """Build a curve using taper settings from configuration."""
        return cls(
            lower=lower,
            upper=upper,
            taper=defaults.taper,
            around_center=defaults.around_center,
        )

    @property
    def range(self) -> FloatRange:
        return FloatRange(self.lower, self.upper)

    def denormalize(self, value: float) -> float:
        """Map a normalized value onto the destination range."""
        return denormalize(value, self.range, self.taper, self.around_center)

    def normalize(self, value: float) -> float:
        """Map a value on the destination range back to [0, 1]."""
        return normalize(value, self.range, self.taper, self.around_center)

    def sample(self, n_samples: int) -> list[CurvePoint]:
        """Sample the curve at evenly-spaced normalized positions.

        Args:
            n_samples: Number of samples (must be >= 2), endpoints included.

        Returns:
            List of CurvePoints, ``v`` ascending from ``lower`` to ``upper``.

        Raises:
            ValueError: If n_samples < 2.
        """
        return [CurvePoint(t=t, v=self.denormalize(t)) for t in sample_unit_interval(n_samples)]
