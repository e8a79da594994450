"""Parameters of facade methods and their roles.

Every parameter has exactly one role. Roles form a closed set of small
frozen dataclasses; code that dispatches on roles handles every member and
raises ModelViolationError for anything else.

    Format        consumed in declaration order as a message-format argument
    Transform     format argument passed through a transform helper first
    Positional    placed at one or more explicit 1-based format slots
    Cause         the throwable attached to the log record / result
    Fqcn          overrides the caller class name
    Message       the synthetic message slot used by constructor binding
    Construction  extra value threaded into a constructed exception
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from logfacade_tools.model.types import STRING, is_array_type


class TransformOp(Enum):
    """Pure derivations applied to a parameter value before formatting."""

    STRING = "string"
    SIZE = "size"
    IDENTITY = "identity"
    TYPE = "type"
    HASH_CODE = "hash_code"
    IDENTITY_HASH_CODE = "identity_hash_code"

    @property
    def helper(self) -> str:
        """Name of the helper function that performs the transform."""
        return f"{self.value}_of"

    @property
    def suffix(self) -> str:
        """Suffix used when naming the local that holds the result."""
        return self.value


@dataclass(frozen=True)
class FormatRole:
    """Next message-format argument, in declaration order."""


@dataclass(frozen=True)
class TransformRole:
    """Format argument derived through a transform helper."""

    op: TransformOp


@dataclass(frozen=True)
class PositionalRole:
    """Fan-out into explicit format slots.

    Attributes:
        positions: 1-based target slots, processed in this order
        transforms: Empty, or one optional TransformOp per position
    """

    positions: tuple[int, ...]
    transforms: tuple[Optional[TransformOp], ...] = ()

    def transform_at(self, index: int) -> Optional[TransformOp]:
        if index < len(self.transforms):
            return self.transforms[index]
        return None


@dataclass(frozen=True)
class CauseRole:
    """The throwable attached to the log record or result."""


@dataclass(frozen=True)
class FqcnRole:
    """Class whose name replaces the default caller FQCN."""


@dataclass(frozen=True)
class MessageRole:
    """Synthetic slot for the formatted message text."""


@dataclass(frozen=True)
class ConstructionRole:
    """Extra value passed to the constructed result type."""


Role = Union[
    FormatRole,
    TransformRole,
    PositionalRole,
    CauseRole,
    FqcnRole,
    MessageRole,
    ConstructionRole,
]

ROLE_TYPES = (
    FormatRole,
    TransformRole,
    PositionalRole,
    CauseRole,
    FqcnRole,
    MessageRole,
    ConstructionRole,
)

# Roles that feed the format argument list
FORMAT_ROLE_TYPES = (FormatRole, TransformRole, PositionalRole)

_ROLE_KINDS = {
    FormatRole: "format",
    TransformRole: "transform",
    PositionalRole: "positional",
    CauseRole: "cause",
    FqcnRole: "fqcn",
    MessageRole: "message",
    ConstructionRole: "construction",
}


@dataclass(frozen=True)
class Parameter:
    """One declared formal argument of a facade method.

    Attributes:
        name: Parameter name as declared
        type: Type name; a trailing ``[]`` marks an array
        role: Exactly one role (see module docstring)
        formatter_type: Optional wrapper type constructed around the value
        is_varargs: True for a trailing variadic parameter
    """

    name: str
    type: str
    role: Role = field(default_factory=FormatRole)
    formatter_type: Optional[str] = None
    is_varargs: bool = False

    @property
    def is_array(self) -> bool:
        return self.is_varargs or is_array_type(self.type)

    @property
    def role_kind(self) -> str:
        return _ROLE_KINDS.get(type(self.role), "unknown")

    @property
    def feeds_format(self) -> bool:
        return isinstance(self.role, FORMAT_ROLE_TYPES)

    @classmethod
    def format(
        cls,
        name: str,
        type: str = "Object",
        formatter_type: Optional[str] = None,
        is_varargs: bool = False,
    ) -> "Parameter":
        return cls(name, type, FormatRole(), formatter_type, is_varargs)

    @classmethod
    def transform(
        cls,
        name: str,
        op: TransformOp,
        type: str = "Object",
        formatter_type: Optional[str] = None,
    ) -> "Parameter":
        return cls(name, type, TransformRole(op), formatter_type)

    @classmethod
    def positional(
        cls,
        name: str,
        positions: tuple[int, ...],
        transforms: tuple[Optional[TransformOp], ...] = (),
        type: str = "Object",
    ) -> "Parameter":
        return cls(name, type, PositionalRole(tuple(positions), tuple(transforms)))

    @classmethod
    def cause(cls, name: str = "cause", type: str = "Throwable") -> "Parameter":
        return cls(name, type, CauseRole())

    @classmethod
    def fqcn(cls, name: str = "loggerClass", type: str = "Class") -> "Parameter":
        return cls(name, type, FqcnRole())

    @classmethod
    def construction(cls, name: str, type: str) -> "Parameter":
        return cls(name, type, ConstructionRole())

    @classmethod
    def for_message(cls) -> "Parameter":
        """The synthetic message slot bound by the constructor resolver."""
        return cls("message", STRING, MessageRole())
