"""Configuration Module for facade generation

Provides typed configuration with environment variable and .env support.
All settings classes accept a parameterized env prefix.

Example:
    from logfacade_tools.config import GeneratorSettings, get_settings

    # Process-wide settings for the default LOGFACADE prefix
    settings = get_settings()

    # Explicit settings
    settings = GeneratorSettings(use_delegating_base=False, catalog_level="INFO")
"""

from logfacade_tools.config.env_loader import EnvLoader, parse_bool
from logfacade_tools.config.settings import (
    DEFAULT_PREFIX,
    GeneratorSettings,
    LogSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    # Dataclass settings
    "GeneratorSettings",
    "LogSettings",
    "DEFAULT_PREFIX",
    # Singleton
    "get_settings",
    "reset_settings",
    # Environment
    "EnvLoader",
    "parse_bool",
]
