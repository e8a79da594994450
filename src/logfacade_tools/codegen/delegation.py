"""Delegating API matrix for the legacy basic logger.

When a facade interface extends the legacy basic-logger capability but the
implementation cannot inherit from the delegating base, it has to expose the
legacy convenience surface itself. Every overload forwards to one canonical
call on the underlying logger.

The surface is a compatibility contract: it is fixed, and its size is a
pure function of the tables below.

    per level L (6):   is{L}Enabled()                   TRACE, DEBUG, INFO only
                       4 raw overloads named l
                       {v,f} x {no cause, cause} x {varargs, 1, 2, 3 params}
    level-parametric:  isEnabled(level)
                       4 raw log(...) overloads
                       {v,f} x {NONE, CAUSE, FQCN} x {varargs, 1, 2, 3 params}

    3 + 6*4 + 6*2*2*4 + 1 + 4 + 2*3*4 = 152 methods
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import chain, product
from typing import Iterator, Optional

from logfacade_tools.codegen.assembly import FQCN_FIELD, LOG_FIELD
from logfacade_tools.codegen.expressions import NULL, Expression, Invoke, LevelRef, Ref
from logfacade_tools.model import OBJECT, OBJECT_ARRAY, STRING, THROWABLE, LogLevel

LEVEL_TYPE = "Level"
BOOLEAN = "boolean"
VOID = "void"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: str
    varargs: bool = False

    def render(self) -> str:
        if self.varargs:
            return f"{self.type}... {self.name}"
        return f"{self.type} {self.name}"


@dataclass(frozen=True)
class DelegatingMethod:
    """One generated overload and the call it forwards to.

    Attributes:
        name: Method name
        return_type: ``boolean`` for enabled queries, otherwise ``void``
        parameters: Declared parameters in order
        call: Forwarding invocation on the underlying logger
        returns: True if the body returns the forwarded call's result
    """

    name: str
    return_type: str
    parameters: tuple[ParameterSpec, ...]
    call: Invoke
    returns: bool = False

    @property
    def signature(self) -> tuple[str, tuple[str, ...]]:
        types = tuple(
            f"{p.type}..." if p.varargs else p.type for p in self.parameters
        )
        return self.name, types

    def render(self) -> str:
        params = ", ".join(p.render() for p in self.parameters)
        return f"{self.return_type} {self.name}({params}) -> {self.call.render()}"


class RenderMode(Enum):
    """Which optional leading parameters a level-parametric overload takes."""

    NONE = (False, False)
    CAUSE = (True, False)
    FQCN = (True, True)

    @property
    def include_throwable(self) -> bool:
        return self.value[0]

    @property
    def include_fqcn(self) -> bool:
        return self.value[1]


# Markers used in raw shape forwarding templates
DEFAULT_FQCN = "<fqcn>"
NULL_ARG = "<null>"

MESSAGE = ParameterSpec("message", OBJECT)
THROWN = ParameterSpec("t", THROWABLE)
LOGGER_FQCN = ParameterSpec("loggerFqcn", STRING)
PARAMS_ARRAY = ParameterSpec("params", OBJECT_ARRAY)
LEVEL = ParameterSpec("level", LEVEL_TYPE)
FORMAT = ParameterSpec("format", STRING)
VARARG_PARAMS = ParameterSpec("params", OBJECT, varargs=True)


@dataclass(frozen=True)
class RawShape:
    """A raw overload: its parameters and the forwarded argument template.

    Template entries are parameter names or the DEFAULT_FQCN / NULL_ARG
    markers.
    """

    parameters: tuple[ParameterSpec, ...]
    forward: tuple[str, ...]


RAW_LEVEL_SHAPES = (
    RawShape((MESSAGE,), (DEFAULT_FQCN, "message", NULL_ARG)),
    RawShape((MESSAGE, THROWN), (DEFAULT_FQCN, "message", "t")),
    RawShape((LOGGER_FQCN, MESSAGE, THROWN), ("loggerFqcn", "message", "t")),
    RawShape(
        (LOGGER_FQCN, MESSAGE, PARAMS_ARRAY, THROWN),
        ("loggerFqcn", "message", "params", "t"),
    ),
)

RAW_LOG_SHAPES = (
    RawShape((LEVEL, MESSAGE), (DEFAULT_FQCN, "level", "message", NULL_ARG, NULL_ARG)),
    RawShape((LEVEL, MESSAGE, THROWN), (DEFAULT_FQCN, "level", "message", NULL_ARG, "t")),
    RawShape((LEVEL, LOGGER_FQCN, MESSAGE, THROWN), ("level", "loggerFqcn", "message", "t")),
    RawShape(
        (LOGGER_FQCN, LEVEL, MESSAGE, PARAMS_ARRAY, THROWN),
        ("loggerFqcn", "level", "message", "params", "t"),
    ),
)

LEVELS = tuple(LogLevel)
ENABLED_QUERY_LEVELS = (LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFO)
AFFIXES = ("v", "f")
THROWABLE_STATES = (False, True)
# None is the varargs form, the rest are explicit parameter counts
ARITIES: tuple[Optional[int], ...] = (None, 1, 2, 3)
RENDER_MODES = tuple(RenderMode)


def expected_method_count() -> int:
    """Size of the matrix, derived from the tables alone."""
    per_level = len(LEVELS) * (
        len(RAW_LEVEL_SHAPES) + len(AFFIXES) * len(THROWABLE_STATES) * len(ARITIES)
    )
    level_parametric = 1 + len(RAW_LOG_SHAPES) + len(AFFIXES) * len(RENDER_MODES) * len(ARITIES)
    return len(ENABLED_QUERY_LEVELS) + per_level + level_parametric


def _format_tail(arity: Optional[int]) -> tuple[ParameterSpec, ...]:
    if arity is None:
        return (FORMAT, VARARG_PARAMS)
    return (FORMAT,) + tuple(ParameterSpec(f"param{i}", OBJECT) for i in range(1, arity + 1))


def _forward_raw(shape: RawShape, fqcn: Expression) -> tuple[Expression, ...]:
    args: list[Expression] = []
    for entry in shape.forward:
        if entry == DEFAULT_FQCN:
            args.append(fqcn)
        elif entry == NULL_ARG:
            args.append(NULL)
        else:
            args.append(Ref(entry))
    return tuple(args)


def _refs(params: tuple[ParameterSpec, ...]) -> tuple[Expression, ...]:
    return tuple(Ref(p.name) for p in params)


def _level_methods(
    level: LogLevel, fqcn: Expression, delegate: Expression
) -> Iterator[DelegatingMethod]:
    if level in ENABLED_QUERY_LEVELS:
        name = f"is{level.capitalized}Enabled"
        yield DelegatingMethod(name, BOOLEAN, (), Invoke(name, target=delegate), returns=True)

    for shape in RAW_LEVEL_SHAPES:
        yield DelegatingMethod(
            level.lowered,
            VOID,
            shape.parameters,
            Invoke(level.lowered, _forward_raw(shape, fqcn), delegate),
        )

    for affix, with_cause, arity in product(AFFIXES, THROWABLE_STATES, ARITIES):
        tail = _format_tail(arity)
        params = ((THROWN,) if with_cause else ()) + tail
        args = (fqcn, LevelRef(level), Ref(THROWN.name) if with_cause else NULL) + _refs(tail)
        yield DelegatingMethod(
            f"{level.lowered}{affix}", VOID, params, Invoke(f"log{affix}", args, delegate)
        )


def _level_parametric_methods(fqcn: Expression, delegate: Expression) -> Iterator[DelegatingMethod]:
    yield DelegatingMethod(
        "isEnabled",
        BOOLEAN,
        (LEVEL,),
        Invoke("isEnabled", (Ref(LEVEL.name),), delegate),
        returns=True,
    )

    for shape in RAW_LOG_SHAPES:
        yield DelegatingMethod(
            "log", VOID, shape.parameters, Invoke("log", _forward_raw(shape, fqcn), delegate)
        )

    for affix, mode, arity in product(AFFIXES, RENDER_MODES, ARITIES):
        tail = _format_tail(arity)
        params = (
            ((LOGGER_FQCN,) if mode.include_fqcn else ())
            + (LEVEL,)
            + ((THROWN,) if mode.include_throwable else ())
            + tail
        )
        args = (
            Ref(LOGGER_FQCN.name) if mode.include_fqcn else fqcn,
            Ref(LEVEL.name),
            Ref(THROWN.name) if mode.include_throwable else NULL,
        ) + _refs(tail)
        name = f"log{affix}"
        yield DelegatingMethod(name, VOID, params, Invoke(name, args, delegate))


def generate_delegating_methods(
    fqcn: Expression = Ref(FQCN_FIELD),
    delegate: Expression = Ref(LOG_FIELD),
) -> list[DelegatingMethod]:
    """Enumerate the full legacy convenience surface.

    Args:
        fqcn: Expression of the facade's caller class name constant
        delegate: Expression of the underlying logger every overload calls

    Returns:
        All overloads in a fixed order: per level, then level-parametric
    """
    per_level = (_level_methods(level, fqcn, delegate) for level in LEVELS)
    return list(chain(chain.from_iterable(per_level), _level_parametric_methods(fqcn, delegate)))
