"""Taper curve models and sampling."""

from taperkit.core.curves.models import CurvePoint
from taperkit.core.curves.sampling import sample_unit_interval
from taperkit.core.curves.taper_curve import TaperCurve

__all__ = [
    "CurvePoint",
    "TaperCurve",
    "sample_unit_interval",
]
