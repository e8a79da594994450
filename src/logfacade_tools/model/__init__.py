"""Declarative model of facade interfaces.

Usage:
    from logfacade_tools.model import (
        LogLevel,
        Message,
        MessageFormat,
        MessageInterface,
        MessageMethod,
        Parameter,
        TransformOp,
    )

    greet = MessageMethod(
        name="greet",
        return_type="void",
        message=Message("Hello %s"),
        parameters=(Parameter.format("name", "String"),),
        log_level=LogLevel.INFO,
    )
"""

from logfacade_tools.model.method import (
    LogLevel,
    Message,
    MessageFormat,
    MessageInterface,
    MessageMethod,
)
from logfacade_tools.model.parameter import (
    FORMAT_ROLE_TYPES,
    ROLE_TYPES,
    CauseRole,
    ConstructionRole,
    FormatRole,
    FqcnRole,
    MessageRole,
    Parameter,
    PositionalRole,
    Role,
    TransformOp,
    TransformRole,
)
from logfacade_tools.model.types import (
    ERROR,
    EXCEPTION,
    OBJECT,
    OBJECT_ARRAY,
    RUNTIME_EXCEPTION,
    STRING,
    THROWABLE,
    ConstructorDescriptor,
    TypeDescriptor,
    TypeRegistry,
    is_array_type,
)

__all__ = [
    # Methods and interfaces
    "LogLevel",
    "Message",
    "MessageFormat",
    "MessageInterface",
    "MessageMethod",
    # Parameters and roles
    "Parameter",
    "Role",
    "ROLE_TYPES",
    "FORMAT_ROLE_TYPES",
    "FormatRole",
    "TransformRole",
    "PositionalRole",
    "CauseRole",
    "FqcnRole",
    "MessageRole",
    "ConstructionRole",
    "TransformOp",
    # Types
    "ConstructorDescriptor",
    "TypeDescriptor",
    "TypeRegistry",
    "is_array_type",
    "OBJECT",
    "OBJECT_ARRAY",
    "STRING",
    "THROWABLE",
    "EXCEPTION",
    "RUNTIME_EXCEPTION",
    "ERROR",
]
