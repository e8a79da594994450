"""Logging for the facade generator.

Usage:
    from logfacade_tools.logger import Logger, get_logger, create_logger

    # Logger configured from LOGFACADE_* environment variables
    logger = get_logger()
    logger.info("Generation started")

    # Explicit configuration
    logger = create_logger(level=logging.DEBUG, json_format=True)

    # Context pinned to every message
    method_log = logger.bind(interface="org.acme.AppLogger", method="greet")

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_FORMAT: "json" for JSON output, anything else for text

    Where {PREFIX} is derived from the logger name ("logfacade" -> LOGFACADE)
"""

import logging
import os
from typing import TYPE_CHECKING, Optional

from .default_logger import DefaultLogger
from .interface import BoundLogger, Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

if TYPE_CHECKING:
    from logfacade_tools.config import LogSettings


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "logfacade" -> "LOGFACADE"
        "logfacade-build" -> "LOGFACADE_BUILD"
    """
    return name.upper().replace("-", "_")


def create_logger(
    name: str = "logfacade",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance with the specified configuration.

    Parameters that are not provided are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_FORMAT.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_FORMAT", "console").lower() == "json"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def create_logger_from_settings(log_settings: "LogSettings", name: str = "logfacade") -> Logger:
    """Create a logger from LogSettings (level, format, log_file).

    Unlike create_logger, nothing is read from the process environment.
    """
    return StructuredLogger(
        name=name,
        level=log_settings.level_number,
        log_file=log_settings.log_file,
        json_format=log_settings.json_format,
    )


def get_logger(name: str = "logfacade") -> Logger:
    """Get a logger configured from environment variables.

    Args:
        name: Logger name

    Returns:
        A configured Logger instance
    """
    return create_logger(name=name)


__all__ = [
    # Interface
    "Logger",
    "BoundLogger",
    # Implementations
    "DefaultLogger",
    "StructuredLogger",
    # Formatters (for custom use)
    "JsonFormatter",
    "TextFormatter",
    # Factory functions
    "create_logger",
    "create_logger_from_settings",
    "get_logger",
]
