"""Configuration management for huecraft."""

from huecraft.core.config.loader import (
    clear_app_config_cache,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from huecraft.core.config.models import (
    AppConfig,
    CompanionDefaults,
    ConfigBase,
    GradientDefaults,
    LoggingConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "clear_app_config_cache",
    "configure_logging",
    "detect_format",
    # Models
    "AppConfig",
    "CompanionDefaults",
    "ConfigBase",
    "GradientDefaults",
    "LoggingConfig",
]
