"""logfacade-tools - Implementation synthesis for message logging facades.

Given a declarative model of a facade interface (logger methods, message
bundle methods, parameter roles), this package builds the implementation
model a printer turns into source:

- model: Parameters, methods, interfaces and type facts
- codegen: Argument assembly, delegating matrix, constructor resolution
  and per-interface implementation assembly
- catalog: Translation catalog files
- logger: Logging with run tracking and JSON support
- config: Typed settings with environment and .env support
- exceptions: Exception classes with structured error info
"""

__version__ = "1.0.0"

# Re-export commonly used items for convenience
from logfacade_tools.logger import (
    Logger,
    DefaultLogger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from logfacade_tools.model import (
    LogLevel,
    Message,
    MessageFormat,
    MessageInterface,
    MessageMethod,
    Parameter,
    TransformOp,
    TypeRegistry,
)

from logfacade_tools.codegen import (
    ConstructorResolver,
    FacadeImplementor,
    assemble_logger_call,
    generate_delegating_methods,
    implement_all,
)

from logfacade_tools.catalog import CatalogWriter

from logfacade_tools.config import (
    GeneratorSettings,
    LogSettings,
    get_settings,
    reset_settings,
)

from logfacade_tools.exceptions import (
    LogFacadeError,
    ModelViolationError,
    UnresolvableConstructorError,
    UnknownTypeError,
    ConfigurationError,
    CatalogWriteError,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "DefaultLogger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Model
    "LogLevel",
    "Message",
    "MessageFormat",
    "MessageInterface",
    "MessageMethod",
    "Parameter",
    "TransformOp",
    "TypeRegistry",
    # Codegen
    "ConstructorResolver",
    "FacadeImplementor",
    "assemble_logger_call",
    "generate_delegating_methods",
    "implement_all",
    # Catalog
    "CatalogWriter",
    # Config
    "GeneratorSettings",
    "LogSettings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "LogFacadeError",
    "ModelViolationError",
    "UnresolvableConstructorError",
    "UnknownTypeError",
    "ConfigurationError",
    "CatalogWriteError",
]
