"""Type facts used by the generator.

The generator never inspects real classes. Everything it needs to know about
a type (its supertypes and the shapes of its constructors) is declared up
front in a TypeRegistry by whoever builds the interface model.

Example:
    registry = TypeRegistry.with_builtins()
    registry.register(
        TypeDescriptor(
            "org.acme.ConfigException",
            supertypes=(RUNTIME_EXCEPTION,),
            constructors=(
                ConstructorDescriptor(()),
                ConstructorDescriptor((STRING,)),
                ConstructorDescriptor((STRING, THROWABLE)),
            ),
        )
    )
    registry.is_assignable("org.acme.ConfigException", THROWABLE)  # True
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from logfacade_tools.exceptions import UnknownTypeError

OBJECT = "Object"
STRING = "String"
THROWABLE = "Throwable"
EXCEPTION = "Exception"
RUNTIME_EXCEPTION = "RuntimeException"
ERROR = "Error"
OBJECT_ARRAY = "Object[]"


def is_array_type(name: str) -> bool:
    """Return True if the type name denotes an array (``Foo[]``)."""
    return name.endswith("[]")


@dataclass(frozen=True)
class ConstructorDescriptor:
    """One constructor of a type.

    Attributes:
        parameter_types: Type names of the constructor parameters, in order
        public: Only public constructors are considered by the resolver
    """

    parameter_types: tuple[str, ...] = ()
    public: bool = True

    @property
    def arity(self) -> int:
        return len(self.parameter_types)


@dataclass(frozen=True)
class TypeDescriptor:
    """Declared facts about a single type.

    Attributes:
        name: Qualified type name
        supertypes: Names of the direct supertypes (classes and interfaces)
        constructors: Constructors in the order the model presents them
    """

    name: str
    supertypes: tuple[str, ...] = ()
    constructors: tuple[ConstructorDescriptor, ...] = ()

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    @property
    def is_array(self) -> bool:
        return is_array_type(self.name)

    def public_constructors(self) -> Iterator[ConstructorDescriptor]:
        return (c for c in self.constructors if c.public)


class TypeRegistry:
    """Name to TypeDescriptor lookup with simple assignability checks.

    Assignability is nominal: ``source`` is assignable to ``target`` when they
    are the same type, when ``target`` is the root Object type, or when
    ``target`` can be reached from ``source`` by following declared
    supertypes. Nothing more (no generics, no boxing, no widening).
    """

    def __init__(self) -> None:
        self._types: Dict[str, TypeDescriptor] = {}

    @classmethod
    def with_builtins(cls) -> "TypeRegistry":
        """Create a registry pre-populated with the well-known root types."""
        registry = cls()
        registry.register(TypeDescriptor(OBJECT, constructors=(ConstructorDescriptor(()),)))
        registry.register(
            TypeDescriptor(
                STRING,
                supertypes=(OBJECT,),
                constructors=(ConstructorDescriptor(()), ConstructorDescriptor((STRING,))),
            )
        )
        registry.register(TypeDescriptor(OBJECT_ARRAY, supertypes=(OBJECT,)))
        for primitive in ("int", "long", "boolean"):
            registry.register(TypeDescriptor(primitive))

        throwable_constructors = (
            ConstructorDescriptor(()),
            ConstructorDescriptor((STRING,)),
            ConstructorDescriptor((STRING, THROWABLE)),
            ConstructorDescriptor((THROWABLE,)),
        )
        registry.register(
            TypeDescriptor(THROWABLE, supertypes=(OBJECT,), constructors=throwable_constructors)
        )
        registry.register(
            TypeDescriptor(EXCEPTION, supertypes=(THROWABLE,), constructors=throwable_constructors)
        )
        registry.register(
            TypeDescriptor(
                RUNTIME_EXCEPTION, supertypes=(EXCEPTION,), constructors=throwable_constructors
            )
        )
        registry.register(
            TypeDescriptor(ERROR, supertypes=(THROWABLE,), constructors=throwable_constructors)
        )
        return registry

    def register(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        """Add or replace a type descriptor."""
        self._types[descriptor.name] = descriptor
        return descriptor

    def get(self, name: str) -> TypeDescriptor:
        """Look up a type by name.

        Raises:
            UnknownTypeError: If the type was never registered
        """
        try:
            return self._types[name]
        except KeyError:
            raise UnknownTypeError(
                f"Type '{name}' is not registered", details={"type": name}
            ) from None

    def find(self, name: str) -> Optional[TypeDescriptor]:
        return self._types.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def is_assignable(self, source: str, target: str) -> bool:
        """Return True if a value of type ``source`` can be used as ``target``."""
        if source == target or target == OBJECT:
            return True
        if is_array_type(source) or is_array_type(target):
            # Arrays only widen to Object, handled above
            return False

        seen = {source}
        queue = deque([source])
        while queue:
            current = self._types.get(queue.popleft())
            if current is None:
                continue
            for parent in current.supertypes:
                if parent == target:
                    return True
                if parent not in seen:
                    seen.add(parent)
                    queue.append(parent)
        return False
