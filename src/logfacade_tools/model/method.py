"""Facade methods and interfaces.

A MessageInterface is the declarative description of a facade: its methods,
the interfaces it extends and whether it extends the legacy basic logger.
Models are immutable once built and are shared read-only by every stage of
generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from logfacade_tools.exceptions import ModelViolationError
from logfacade_tools.model.parameter import (
    FORMAT_ROLE_TYPES,
    CauseRole,
    ConstructionRole,
    FqcnRole,
    Parameter,
    PositionalRole,
)


class LogLevel(Enum):
    """Severities, ordered most verbose to most severe."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"

    @property
    def lowered(self) -> str:
        return self.value.lower()

    @property
    def capitalized(self) -> str:
        return self.value.capitalize()


class MessageFormat(Enum):
    """How a message template consumes its arguments."""

    PRINTF = "printf"
    MESSAGE_FORMAT = "message_format"
    NO_FORMAT = "no_format"

    @property
    def is_formatted(self) -> bool:
        return self is not MessageFormat.NO_FORMAT

    @property
    def logger_primitive(self) -> str:
        """Underlying log primitive used for this format."""
        return _PRIMITIVES[self]


_PRIMITIVES = {
    MessageFormat.PRINTF: "logf",
    MessageFormat.MESSAGE_FORMAT: "logv",
    MessageFormat.NO_FORMAT: "log",
}


@dataclass(frozen=True)
class Message:
    """Raw message template of a method.

    Attributes:
        value: Template text
        format: Template flavour
        id: Optional numeric message id
    """

    value: str
    format: MessageFormat = MessageFormat.PRINTF
    id: Optional[int] = None


@dataclass(frozen=True)
class MessageMethod:
    """One method of a facade interface.

    Logger methods (``log_level`` set) emit a record; every other method
    builds a message or an exception value and returns or throws it.
    """

    name: str
    return_type: str
    message: Message
    parameters: tuple[Parameter, ...] = ()
    log_level: Optional[LogLevel] = None
    translation_key: Optional[str] = None
    thrown_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.translation_key is None:
            object.__setattr__(self, "translation_key", self.name)
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def is_logger_method(self) -> bool:
        return self.log_level is not None

    @property
    def message_format(self) -> MessageFormat:
        return self.message.format

    @property
    def cause(self) -> Optional[Parameter]:
        return next((p for p in self.parameters if isinstance(p.role, CauseRole)), None)

    @property
    def has_cause(self) -> bool:
        return self.cause is not None

    @property
    def fqcn_parameter(self) -> Optional[Parameter]:
        return next((p for p in self.parameters if isinstance(p.role, FqcnRole)), None)

    @property
    def construction_parameters(self) -> tuple[Parameter, ...]:
        return self.parameters_of(ConstructionRole)

    @property
    def parameter_names(self) -> frozenset[str]:
        return frozenset(p.name for p in self.parameters)

    @property
    def parameter_types(self) -> tuple[str, ...]:
        return tuple(p.type for p in self.parameters)

    @property
    def message_accessor(self) -> str:
        """Name of the paired accessor that returns the raw template."""
        return f"{self.name}$str"

    @property
    def logger_primitive(self) -> str:
        return self.message.format.logger_primitive

    def parameters_of(self, *role_types: type) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if isinstance(p.role, role_types))

    def validate(self) -> None:
        """Check the model invariants.

        The implementor only reports violations as warnings; a broken model
        still produces degenerate output instead of failing.

        Raises:
            ModelViolationError: On the first invariant that does not hold
        """
        details = {"method": self.name}
        if len(self.parameters_of(CauseRole)) > 1:
            raise ModelViolationError("More than one cause parameter declared", details=details)
        if len(self.parameters_of(FqcnRole)) > 1:
            raise ModelViolationError("More than one FQCN parameter declared", details=details)
        if not self.message.format.is_formatted and self.parameters_of(*FORMAT_ROLE_TYPES):
            raise ModelViolationError(
                "NO_FORMAT method declares format, transform or positional parameters",
                details=details,
            )
        for param in self.parameters_of(PositionalRole):
            role = param.role
            if not role.positions or any(p < 1 for p in role.positions):
                raise ModelViolationError(
                    f"Parameter '{param.name}' has invalid positions {role.positions}",
                    details=details,
                )
            if role.transforms and len(role.transforms) != len(role.positions):
                raise ModelViolationError(
                    f"Parameter '{param.name}' declares {len(role.transforms)} transforms "
                    f"for {len(role.positions)} positions",
                    details=details,
                )


@dataclass(frozen=True)
class MessageInterface:
    """A facade interface to implement.

    Attributes:
        qualified_name: Dotted name of the interface
        methods: Methods declared directly on the interface
        extended: Extended message interfaces whose methods are implemented too
        extends_basic_logger: True if the interface also extends the legacy
            basic logger capability
        logging_fqcn: Caller class name to report instead of the
            implementation's own name
        project_code: Optional message id prefix
    """

    qualified_name: str
    methods: tuple[MessageMethod, ...] = ()
    extended: tuple["MessageInterface", ...] = ()
    extends_basic_logger: bool = False
    logging_fqcn: Optional[str] = None
    project_code: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "methods", tuple(self.methods))
        object.__setattr__(self, "extended", tuple(self.extended))

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def package_name(self) -> str:
        if "." not in self.qualified_name:
            return ""
        return self.qualified_name.rsplit(".", 1)[0]

    @property
    def has_logger_methods(self) -> bool:
        return any(m.is_logger_method for m in self.all_methods())

    def all_methods(self) -> list[MessageMethod]:
        """Own methods plus those of extended interfaces, first occurrence wins."""
        seen: set[tuple[str, tuple[str, ...]]] = set()
        result: list[MessageMethod] = []
        for method in self._walk_methods():
            key = (method.name, method.parameter_types)
            if key not in seen:
                seen.add(key)
                result.append(method)
        return result

    def _walk_methods(self) -> Iterator[MessageMethod]:
        yield from self.methods
        for parent in self.extended:
            yield from parent._walk_methods()

