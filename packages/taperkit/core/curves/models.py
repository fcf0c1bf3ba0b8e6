"""Curve point models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CurvePoint(BaseModel):
    """A single sample of a taper curve.

    ``t`` is the normalized position and ``v`` the value on the target range.
    This model is immutable (frozen=True).

    Attributes:
        t: Normalized position in range [0, 1].
        v: Denormalized value.

    Example:
        >>> point = CurvePoint(t=0.5, v=1000.0)
        >>> point.t
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized position [0,1]")
    v: float = Field(..., description="Value on the target range")
