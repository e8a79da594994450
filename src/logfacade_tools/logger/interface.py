"""Logger interface for the generator.

Abstract base class defining the logging contract used by every stage of
facade generation, plus a small wrapper that pins context keys (interface,
method) onto every message.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for the generator's own diagnostics.

    A logger instance belongs to one generation run; the run id is what
    ``get_session_id()`` returns and is attached to every record.

    Example:
        log = get_logger("logfacade")
        method_log = log.bind(interface="org.acme.AppLogger", method="greet")
        method_log.debug("Assembled logger call", primitive="logf")
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the id of the generation run this logger reports for."""

    def bind(self, **context: Any) -> "Logger":
        """Return a logger that adds ``context`` to every call."""
        return BoundLogger(self, context)


class BoundLogger(Logger):
    """Logger wrapper carrying fixed context key-value pairs.

    Per-call kwargs win over bound context on key clashes.
    """

    def __init__(self, delegate: Logger, context: dict[str, Any]):
        self._delegate = delegate
        self._context = dict(context)

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def _merge(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        merged = dict(self._context)
        merged.update(kwargs)
        return merged

    def bind(self, **context: Any) -> "Logger":
        return BoundLogger(self._delegate, self._merge(context))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._delegate.debug(message, **self._merge(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._delegate.info(message, **self._merge(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._delegate.warning(message, **self._merge(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._delegate.error(message, **self._merge(kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._delegate.critical(message, **self._merge(kwargs))

    def get_session_id(self) -> str:
        return self._delegate.get_session_id()
