"""Shared pytest fixtures for taperkit tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

from taperkit.core.config import loader
from taperkit.core.numeric.ranges import FloatRange

# ============================================================================
# Range Fixtures
# ============================================================================


@pytest.fixture
def symmetric_range() -> FloatRange:
    """Range centered on zero."""
    return FloatRange(-10.0, 10.0)


@pytest.fixture
def audio_range() -> FloatRange:
    """Audible frequency range in Hz."""
    return FloatRange(20.0, 20000.0)


# ============================================================================
# Global State Fixtures
# ============================================================================


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def reset_app_config_cache() -> Iterator[None]:
    """Clear the cached default app config between tests."""
    loader._app_config_cache = None
    yield
    loader._app_config_cache = None


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture that writes a config file and returns its path."""

    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
