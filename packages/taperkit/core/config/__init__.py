"""Configuration management for taperkit."""

from taperkit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from taperkit.core.config.models import (
    AppConfig,
    ConfigBase,
    LoggingConfig,
    RoundingConfig,
    TaperDefaults,
)

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "ConfigBase",
    "LoggingConfig",
    "RoundingConfig",
    "TaperDefaults",
]
