"""Configuration models for taperkit."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class ConfigBase(BaseModel):
    """Base class for taperkit configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to defaults when it is absent.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            ValueError: If the file format is unsupported or its content is invalid
            ValidationError: If config is invalid
        """
        from taperkit.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        if not Path(path).exists():
            return cls()
        return cls.model_validate(load_config(path))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class TaperDefaults(BaseModel):
    """Default taper settings used when a caller does not supply them."""

    taper: float = Field(default=0.5, gt=0.0, lt=1.0, description="Curve shape (0.5 = linear)")
    around_center: bool = Field(default=False, description="Fold around the range midpoint")


class RoundingConfig(BaseModel):
    """Decimal rounding defaults."""

    digits: int = Field(default=2, ge=0, description="Fractional digits to keep")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    taper: TaperDefaults = TaperDefaults()
    rounding: RoundingConfig = RoundingConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("taperkit.yaml")
