"""Abstract argument expressions.

Generated method bodies are described with a handful of immutable
expression nodes. A printer turns them into source text for whatever
target it writes; ``render()`` gives a compact, language-neutral form that
is handy for logging and for asserting on generated models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from logfacade_tools.model import LogLevel


@dataclass(frozen=True)
class Ref:
    """Reference to a parameter, local, field or constant by name."""

    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class Null:
    def render(self) -> str:
        return "null"


@dataclass(frozen=True)
class LevelRef:
    """Verbatim reference to a log level constant."""

    level: LogLevel

    def render(self) -> str:
        return f"Level.{self.level.value}"


@dataclass(frozen=True)
class Invoke:
    """Method invocation, on ``target`` or on the implementation itself."""

    method: str
    args: tuple["Expression", ...] = ()
    target: Optional["Expression"] = None

    def render(self) -> str:
        call = f"{self.method}({render_args(self.args)})"
        if self.target is None:
            return call
        return f"{self.target.render()}.{call}"


@dataclass(frozen=True)
class New:
    """Construction of ``type_name`` with the given arguments."""

    type_name: str
    args: tuple["Expression", ...] = ()

    def render(self) -> str:
        return f"new {self.type_name}({render_args(self.args)})"


@dataclass(frozen=True)
class Helper:
    """Call to a pure runtime helper (array rendering, transforms, format)."""

    name: str
    args: tuple["Expression", ...] = ()

    def render(self) -> str:
        return f"{self.name}({render_args(self.args)})"


Expression = Union[Ref, Null, LevelRef, Invoke, New, Helper]

NULL = Null()

ARRAY_TO_STRING = "array_to_string"
FORMAT = "format"
MESSAGE_FORMAT = "message_format"


def render_args(args: Sequence[Expression]) -> str:
    return ", ".join(arg.render() for arg in args)


def invoke(method: str, *args: Expression, target: Optional[Expression] = None) -> Invoke:
    return Invoke(method, tuple(args), target)
