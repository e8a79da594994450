"""Base exception classes for facade generation.

All generator exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (interface, method, type names)

Errors are local to the method or type being generated. The implementor
records them per method and keeps going, so none of these escape a full
interface run unless the caller asks for them.
"""

from typing import Any, Dict, Optional


class LogFacadeError(Exception):
    """Base exception for all facade generation errors.

    Attributes:
        code: Machine-readable error code (e.g., "MODEL_VIOLATION")
        message: Human-readable error message
        details: Optional additional context for diagnostics
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ModelViolationError(LogFacadeError):
    """An input model breaks one of its invariants.

    Raised by MessageMethod.validate() and by operations invoked on the
    wrong kind of method (e.g. assembling a log call for a bundle method).
    """

    def __init__(
        self, message: str, code: str = "MODEL_VIOLATION", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class UnresolvableConstructorError(LogFacadeError):
    """No constructor of a result type can build the requested value."""

    def __init__(
        self,
        message: str,
        code: str = "UNRESOLVABLE_CONSTRUCTOR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


class UnknownTypeError(LogFacadeError):
    """A type name was looked up that the registry does not know."""

    def __init__(
        self, message: str, code: str = "UNKNOWN_TYPE", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class ConfigurationError(LogFacadeError):
    """Generator configuration is invalid (bad level names, formats, ...)."""

    def __init__(
        self,
        message: str,
        code: str = "CONFIGURATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


class CatalogWriteError(LogFacadeError):
    """A translation catalog file could not be written."""

    def __init__(
        self,
        message: str,
        code: str = "CATALOG_WRITE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)
