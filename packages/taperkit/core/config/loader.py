"""Read taperkit settings from JSON or YAML files into validated models."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
from typing import Any

import yaml

from taperkit.core.config.models import AppConfig
from taperkit.core.utils.json import read_json
from taperkit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_DEFAULT_APP_CONFIG_PATH = AppConfig.default_path()
_app_config_cache: AppConfig | None = None

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def _parse_json(path: Path) -> Any:
    try:
        return read_json(path)
    except ValueError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            # empty documents load as None
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


_PARSERS: dict[str, Callable[[Path], Any]] = {"json": _parse_json, "yaml": _parse_yaml}


def detect_format(file_path: Path | str) -> str:
    """Name the settings format implied by a file suffix.

    Example:
        >>> detect_format("taperkit.YML")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix or '<none>'}") from None


def load_config(path: str | Path) -> dict[str, Any]:
    """Parse a settings file into a plain mapping.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: For an unknown suffix, unparsable content or a non-mapping root.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)
    content = _PARSERS[fmt](path)
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")

    logger.debug("Loaded %s config from %s", fmt, path)
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Build the application settings, falling back to defaults.

    The default ``taperkit.yaml`` is read once per process and cached. Explicit
    paths are always re-read. A missing file yields ``AppConfig()``.

    Raises:
        ValidationError: If the file holds out-of-range settings.
    """
    global _app_config_cache

    path = _DEFAULT_APP_CONFIG_PATH if path is None else Path(path)
    use_cache = path == _DEFAULT_APP_CONFIG_PATH
    if use_cache and _app_config_cache is not None:
        return _app_config_cache

    if path.exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug("No config at %s, using defaults", path)
        config = AppConfig()

    if use_cache:
        _app_config_cache = config
    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Apply the ``logging`` section of the settings to the root logger."""
    settings = (config or load_app_config()).logging
    _configure_logging(
        level=settings.level,
        format_string=settings.format,
        filename=settings.filename,
        structured=settings.structured,
    )
