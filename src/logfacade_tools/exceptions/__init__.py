"""Exceptions raised while generating facade implementations.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for diagnostics

Usage:
    from logfacade_tools.exceptions import (
        LogFacadeError,
        ModelViolationError,
        UnresolvableConstructorError,
    )
"""

from logfacade_tools.exceptions.base import (
    CatalogWriteError,
    ConfigurationError,
    LogFacadeError,
    ModelViolationError,
    UnknownTypeError,
    UnresolvableConstructorError,
)

__all__ = [
    "LogFacadeError",
    "ModelViolationError",
    "UnresolvableConstructorError",
    "UnknownTypeError",
    "ConfigurationError",
    "CatalogWriteError",
]
