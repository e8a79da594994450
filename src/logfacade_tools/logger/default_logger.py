"""Stream logger with run tracking.

Writes one line per message to a text stream (default: stderr). Used when
the generator runs embedded in another tool and in tests, where an
``io.StringIO`` output makes diagnostics easy to assert on.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, TextIO

from .interface import Logger


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.DEBUG


class DefaultLogger(Logger):
    """Line-oriented logger for generation runs.

    Example:
        logger = DefaultLogger(output=io.StringIO(), min_level="DEBUG")
        logger.info("Implemented interface", interface="org.acme.AppLogger")
        # [INFO] [logfacade] [run:1a2b3c4d] Implemented interface (interface=org.acme.AppLogger)
    """

    def __init__(
        self,
        name: str = "logfacade",
        output: TextIO = sys.stderr,
        include_timestamp: bool = False,
        min_level: str = "DEBUG",
    ):
        """Initialize the default logger.

        Args:
            name: Logger name (included in output for identification)
            output: Output stream (default: stderr)
            include_timestamp: Whether to prefix lines with a UTC timestamp
            min_level: Messages below this level are dropped
        """
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp
        self._min_level = _level_number(min_level)

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []

        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())

        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(f"[run:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            extra = " ".join(f"{k}={v}" for k, v in kwargs.items())
            parts.append(f"({extra})")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _level_number(level) < self._min_level:
            return
        print(self._format_message(level, message, **kwargs), file=self._output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
