"""Argument assembly for logger methods.

Turns one logger method's parameter metadata into the ordered argument list
of its underlying log primitive call:

    NO_FORMAT:  primitive(fqcn, level, message, null, cause-or-null)
    formatted:  primitive(fqcn, level, cause-or-null, template, *format_args)

Format arguments are built in declaration order. Positional parameters are
placed with insert-or-append: a slot whose index is already inside the
growing list is inserted there, anything else is appended. Processing order
therefore matters, and that is intended: an interface can declare its
parameters in one order while the template references them in another.

Nothing here validates the model. A positional slot that the template never
uses simply produces an unused argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from logfacade_tools.codegen.expressions import (
    ARRAY_TO_STRING,
    NULL,
    Expression,
    Helper,
    Invoke,
    LevelRef,
    New,
    Ref,
)
from logfacade_tools.exceptions import ModelViolationError
from logfacade_tools.model import (
    CauseRole,
    ConstructionRole,
    FormatRole,
    FqcnRole,
    MessageMethod,
    MessageRole,
    Parameter,
    PositionalRole,
    TransformOp,
    TransformRole,
)

FQCN_FIELD = "FQCN"
LOG_FIELD = "log"
NAME_ACCESSOR = "getName"


@dataclass(frozen=True)
class LocalBinding:
    """A local the method body declares before the log call."""

    name: str
    expression: Expression

    def render(self) -> str:
        return f"{self.name} = {self.expression.render()}"


@dataclass(frozen=True)
class FormatArguments:
    args: tuple[Expression, ...]
    locals: tuple[LocalBinding, ...] = ()


@dataclass(frozen=True)
class LoggerCall:
    """The single primitive call a logger method body makes.

    Attributes:
        target: Expression of the underlying logger
        primitive: Name of the underlying log method (log, logf, logv)
        arguments: Ordered argument expressions
        locals: Transform locals to declare before the call
    """

    target: Expression
    primitive: str
    arguments: tuple[Expression, ...]
    locals: tuple[LocalBinding, ...] = ()

    @property
    def invocation(self) -> Invoke:
        return Invoke(self.primitive, self.arguments, self.target)

    def render(self) -> str:
        return self.invocation.render()


class LocalNameAllocator:
    """Hands out local names that never collide with declared parameters.

    ``allocate("count_size")`` returns ``count_size`` unless a parameter (or an
    earlier allocation) already uses it, in which case ``count_size_1``,
    ``count_size_2``, ... are tried in turn.
    """

    def __init__(self, declared_names: Iterable[str]):
        self._declared = frozenset(declared_names)
        self._allocated: list[str] = []

    @property
    def allocated(self) -> tuple[str, ...]:
        return tuple(self._allocated)

    def is_taken(self, name: str) -> bool:
        return name in self._declared or name in self._allocated

    def allocate(self, base: str) -> str:
        candidate = base
        counter = 0
        while self.is_taken(candidate):
            counter += 1
            candidate = f"{base}_{counter}"
        self._allocated.append(candidate)
        return candidate


def transform_expression(op: TransformOp, value: Expression) -> Helper:
    """Expression applying a transform helper to ``value``."""
    return Helper(op.helper, (value,))


def _insert_or_append(args: list[Expression], index: int, value: Expression) -> None:
    if 0 <= index < len(args):
        args.insert(index, value)
    else:
        args.append(value)


def build_format_arguments(
    method: MessageMethod, allocator: Optional[LocalNameAllocator] = None
) -> FormatArguments:
    """Build the format argument tail for a formatted message.

    Args:
        method: Method whose parameters are processed in declaration order
        allocator: Name allocator for transform locals; defaults to one
            seeded with the method's declared parameter names

    Returns:
        The ordered format arguments and the transform locals they reference
    """
    if allocator is None:
        allocator = LocalNameAllocator(method.parameter_names)

    args: list[Expression] = []
    bindings: list[LocalBinding] = []

    def bind_transform(param: Parameter, op: TransformOp) -> Ref:
        name = allocator.allocate(f"{param.name}_{op.suffix}")
        bindings.append(LocalBinding(name, transform_expression(op, Ref(param.name))))
        return Ref(name)

    for param in method.parameters:
        role = param.role
        value = Ref(param.name)
        if isinstance(role, FormatRole):
            if param.formatter_type is not None:
                args.append(New(param.formatter_type, (value,)))
            elif param.is_array:
                args.append(Helper(ARRAY_TO_STRING, (value,)))
            else:
                args.append(value)
        elif isinstance(role, TransformRole):
            transformed = bind_transform(param, role.op)
            if param.formatter_type is None:
                args.append(transformed)
            else:
                args.append(New(param.formatter_type, (transformed,)))
        elif isinstance(role, PositionalRole):
            for i, position in enumerate(role.positions):
                op = role.transform_at(i)
                slot = value if op is None else bind_transform(param, op)
                _insert_or_append(args, position - 1, slot)
        elif isinstance(role, (CauseRole, FqcnRole, MessageRole, ConstructionRole)):
            continue
        else:
            raise ModelViolationError(
                f"Parameter '{param.name}' has an unsupported role {role!r}",
                details={"method": method.name, "parameter": param.name},
            )

    return FormatArguments(tuple(args), tuple(bindings))


def fqcn_argument(method: MessageMethod, default: Expression) -> Expression:
    """Caller class name argument: the declared FQCN parameter or ``default``."""
    param = method.fqcn_parameter
    if param is None:
        return default
    return Invoke(NAME_ACCESSOR, target=Ref(param.name))


def cause_argument(method: MessageMethod) -> Expression:
    cause = method.cause
    return NULL if cause is None else Ref(cause.name)


def assemble_logger_call(
    method: MessageMethod,
    fqcn: Expression = Ref(FQCN_FIELD),
    logger: Expression = Ref(LOG_FIELD),
) -> LoggerCall:
    """Assemble the primitive call for a logger method.

    Args:
        method: A logger method (``log_level`` set)
        fqcn: Expression of the facade-wide caller class name constant
        logger: Expression of the underlying logger

    Raises:
        ModelViolationError: If ``method`` is not a logger method
    """
    if method.log_level is None:
        raise ModelViolationError(
            f"Method '{method.name}' has no log level and cannot emit a log record",
            details={"method": method.name},
        )

    arguments: list[Expression] = [fqcn_argument(method, fqcn), LevelRef(method.log_level)]
    message_text = Invoke(method.message_accessor)

    if not method.message_format.is_formatted:
        arguments.extend((message_text, NULL, cause_argument(method)))
        return LoggerCall(logger, method.logger_primitive, tuple(arguments))

    format_args = build_format_arguments(method)
    arguments.append(cause_argument(method))
    arguments.append(message_text)
    arguments.extend(format_args.args)
    return LoggerCall(logger, method.logger_primitive, tuple(arguments), format_args.locals)
