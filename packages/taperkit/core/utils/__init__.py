"""Shared utilities for taperkit."""

from taperkit.core.utils.json import read_json
from taperkit.core.utils.logging import StructuredJSONFormatter, configure_logging, get_logger

__all__ = [
    "StructuredJSONFormatter",
    "configure_logging",
    "get_logger",
    "read_json",
]
