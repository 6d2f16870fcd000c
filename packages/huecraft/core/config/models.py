"""Configuration models for huecraft."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from huecraft.core.companions.enums import CompanionPurpose
from huecraft.core.formats.css import GradientType


class ConfigBase(BaseModel):
    """Base class for huecraft configuration files.

    Subclasses provide default_path() so callers can load them without
    naming a file.
    """

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from ``path`` or the default path.

        Raises:
            FileNotFoundError: If an explicit config file doesn't exist
            ValidationError: If config is invalid
        """
        from huecraft.core.config.loader import load_app_config, load_config

        if cls.__name__ == "AppConfig":
            return load_app_config(path)  # type: ignore[return-value]

        if path is None:
            path = cls.default_path()
        return cls.model_validate(load_config(path))


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file; stderr when unset")


class GradientDefaults(BaseModel):
    """Defaults for vibe gradient generation and CSS rendering."""

    model_config = ConfigDict(extra="forbid")

    style: str = Field(default="auto", description="Gradient style id or 'auto'")
    stops: int = Field(default=3, ge=1, le=16, description="Key stops before optimization")
    hue_path: str = Field(default="auto", description="short, long, warm, cool or 'auto'")
    angle: float = Field(default=90.0, description="Linear/conic angle in degrees")
    gradient_type: GradientType = Field(default=GradientType.LINEAR)


class CompanionDefaults(BaseModel):
    """Defaults for companion generation."""

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=5, ge=1, le=12, description="Palette size")
    include_input: bool = Field(default=True, description="Put the input first in the palette")
    purpose: CompanionPurpose = Field(default=CompanionPurpose.PALETTE)
    seed: int | None = Field(default=None, description="Seed for repeatable palettes")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    gradient: GradientDefaults = GradientDefaults()
    companions: CompanionDefaults = CompanionDefaults()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("huecraft.json")


__all__ = [
    "AppConfig",
    "CompanionDefaults",
    "ConfigBase",
    "GradientDefaults",
    "LoggingConfig",
]
