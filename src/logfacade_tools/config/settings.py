"""Dataclass-based settings for facade generation.

Provides typed configuration with environment variable support. All
settings classes accept a parameterized env prefix (default: LOGFACADE).

Design principles:
- Single source of truth for generator options
- Environment variable overrides with sensible defaults
- .env files honoured through EnvLoader
- Validation raises ConfigurationError, never a bare ValueError
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union

from logfacade_tools.catalog.levels import LEVEL_VALUES
from logfacade_tools.config.env_loader import EnvLoader, parse_bool
from logfacade_tools.exceptions import ConfigurationError

DEFAULT_PREFIX = "LOGFACADE"

_ALLOWED_LOG_FORMATS = {"console", "json"}
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class LogSettings:
    """Logging configuration for the generator itself

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console or json)
        log_file: Optional file to log to in addition to stdout
    """

    level: str = "INFO"
    format: str = "console"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format = self.format.lower()

    @property
    def json_format(self) -> bool:
        return self.format == "json"

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level, logging.INFO)

    @classmethod
    def from_env(
        cls, prefix: str = DEFAULT_PREFIX, env: Optional[Mapping[str, str]] = None
    ) -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_FORMAT: Log format
            {prefix}_LOG_FILE: Optional log file
        """
        env = env if env is not None else EnvLoader().load()
        return cls(
            level=env.get(f"{prefix}_LOG_LEVEL", "INFO"),
            format=env.get(f"{prefix}_LOG_FORMAT", "console"),
            log_file=env.get(f"{prefix}_LOG_FILE") or None,
        )

    def validate(self) -> None:
        if self.level not in _ALLOWED_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.level}'. Expected one of {sorted(_ALLOWED_LOG_LEVELS)}.",
                details={"level": self.level},
            )
        if self.format not in _ALLOWED_LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format '{self.format}'. Expected one of {sorted(_ALLOWED_LOG_FORMATS)}.",
                details={"format": self.format},
            )


@dataclass
class GeneratorSettings:
    """Options that shape generated facade implementations

    Attributes:
        use_delegating_base: Extend the delegating logger base when an
            interface extends the basic logger; when False, the full
            delegating method matrix is generated instead
        logging_fqcn: Caller class name reported for every interface that
            does not declare its own
        translation_output_dir: Where translation catalogs are written
        catalog_level: Lowest logger method level written to catalogs
        log: Logging settings for the generator itself
        prefix: Environment variable prefix used
    """

    use_delegating_base: bool = True
    logging_fqcn: Optional[str] = None
    translation_output_dir: Optional[Union[Path, str]] = None
    catalog_level: Optional[str] = None
    log: LogSettings = field(default_factory=LogSettings)
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        if isinstance(self.translation_output_dir, str):
            self.translation_output_dir = Path(self.translation_output_dir)
        if self.catalog_level:
            self.catalog_level = self.catalog_level.upper()
        else:
            self.catalog_level = None

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env_file: Optional[Union[Path, str]] = None,
        overrides: Optional[Mapping[str, str]] = None,
    ) -> "GeneratorSettings":
        """Load generator settings from .env, environment and overrides

        Args:
            prefix: Environment variable prefix
            env_file: Optional .env file (defaults to ./.env when present)
            overrides: Highest-precedence values

        Environment variables:
            {prefix}_USE_DELEGATING_BASE: true/false (default: true)
            {prefix}_LOGGING_FQCN: Caller class name override
            {prefix}_TRANSLATION_DIR: Translation catalog output directory
            {prefix}_CATALOG_LEVEL: Catalog level threshold
            {prefix}_LOG_LEVEL / {prefix}_LOG_FORMAT / {prefix}_LOG_FILE

        Raises:
            ConfigurationError: If a flag cannot be parsed
        """
        env = EnvLoader(env_file).load(overrides)
        flag_name = f"{prefix}_USE_DELEGATING_BASE"
        try:
            use_delegating_base = parse_bool(env.get(flag_name), True)
        except ValueError as exc:
            raise ConfigurationError(str(exc), details={"variable": flag_name}) from exc

        return cls(
            use_delegating_base=use_delegating_base,
            logging_fqcn=env.get(f"{prefix}_LOGGING_FQCN") or None,
            translation_output_dir=env.get(f"{prefix}_TRANSLATION_DIR") or None,
            catalog_level=env.get(f"{prefix}_CATALOG_LEVEL") or None,
            log=LogSettings.from_env(prefix, env),
            prefix=prefix,
        )

    def validate(self) -> None:
        """Validate settings for consistency

        Raises:
            ConfigurationError: If settings are invalid
        """
        if self.catalog_level is not None and self.catalog_level not in LEVEL_VALUES:
            raise ConfigurationError(
                f"Invalid catalog level '{self.catalog_level}'.",
                details={"catalog_level": self.catalog_level},
            )
        self.log.validate()


# Global settings storage per prefix
_global_settings: dict[str, GeneratorSettings] = {}


def get_settings(
    prefix: str = DEFAULT_PREFIX,
    reload: bool = False,
    env_file: Optional[Union[Path, str]] = None,
) -> GeneratorSettings:
    """Get or create the settings instance for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload settings from the environment
        env_file: Optional .env file

    Returns:
        Validated GeneratorSettings for the prefix
    """
    if prefix not in _global_settings or reload:
        settings = GeneratorSettings.from_env(prefix=prefix, env_file=env_file)
        settings.validate()
        _global_settings[prefix] = settings

    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Reset settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()
