"""Logging setup for taperkit: text or JSON-lines output on stdout or a file."""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
import sys
from typing import Any

import numpy as np

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _json_default(value: Any) -> Any:
    # numpy scalars (float32 tapers, float64 results) serialize as numbers
    if isinstance(value, np.generic):
        return value.item()
    return str(value)


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Output shape::

        {"level": "DEBUG", "message": "...", "timestamp": "<ISO-8601 UTC>",
         "context": {"logger_name": ..., "module": ..., "function": ..., "line": ..., **extra}}

    Exception details land in ``context`` as ``error_type``, ``error_message``
    and ``stack_trace``.
    """

    def _error_context(self, record: logging.LogRecord) -> dict[str, Any]:
        if not record.exc_info:
            return {}
        exc_type, exc_value, _ = record.exc_info
        return {
            "error_type": exc_type.__name__ if exc_type else None,
            "error_message": str(exc_value) if exc_value is not None else None,
            "stack_trace": record.exc_text or self.formatException(record.exc_info),
        }

    def format(self, record: logging.LogRecord) -> str:
        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED and not key.startswith("_")
        }
        context = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            **self._error_context(record),
            **extra,
        }
        return json.dumps(
            {
                "level": record.levelname,
                "message": record.getMessage(),
                "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
                "context": context,
            },
            default=_json_default,
        )


def _build_handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename)
    return logging.StreamHandler(sys.stdout)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Replace the root logger's handlers with a single configured one.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format; ignored when ``structured`` is set.
        filename: Log file path; stdout when None.
        structured: Emit JSON lines through StructuredJSONFormatter.
    """
    handler = _build_handler(filename)
    handler.setFormatter(
        StructuredJSONFormatter() if structured else logging.Formatter(format_string or DEFAULT_FORMAT)
    )
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, adapted to carry ``context`` on every record."""
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, context) if context else logger
