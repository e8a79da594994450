"""Constructor resolution for exception and result types.

A bundle method that returns or throws a custom exception needs to know how
that type can be built. The resolver answers two questions:

1. Which of the well-known constructor shapes exist among the type's public
   constructors: ``()``, ``(String)``, ``(Throwable)``, ``(String, Throwable)``
   and ``(Throwable, String)``. The answer depends on the type alone and is
   cached per type.

2. For a method declaring construction parameters, which constructor can
   take them, and in which slot order. This is a greedy left-to-right walk
   over each public constructor in the order the model lists them; the
   first constructor that binds wins. It is deliberately not overload
   resolution, so ambiguous types bind the same way every time.

Example:
    resolver = ConstructorResolver(TypeRegistry.with_builtins())
    descriptor = resolver.describe_for_method("org.acme.QueryFailed", method)
    if descriptor.use_construction_binding:
        for param in descriptor.construction_binding:
            ...
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from typing import Dict, Optional

from logfacade_tools.model import (
    ERROR,
    RUNTIME_EXCEPTION,
    STRING,
    THROWABLE,
    ConstructorDescriptor,
    MessageMethod,
    Parameter,
    TypeDescriptor,
    TypeRegistry,
)


@dataclass(frozen=True)
class ThrowableDescriptor:
    """Constructor facts about a result type.

    The generic form (``use_construction_binding`` False, empty binding) is
    shared between methods. A method-scoped form additionally carries the
    binding found for that method's construction parameters.
    """

    type_name: str
    has_default_constructor: bool = False
    has_string_constructor: bool = False
    has_throwable_constructor: bool = False
    has_string_throwable_constructor: bool = False
    has_throwable_string_constructor: bool = False
    is_checked: bool = True
    use_construction_binding: bool = False
    construction_binding: tuple[Parameter, ...] = ()
    bound_constructor: Optional[ConstructorDescriptor] = None


class ConstructorResolver:
    """Derives ThrowableDescriptors from a TypeRegistry.

    Generic descriptors are computed at most once per type name and shared
    read-only; the cache can be used from several threads.
    """

    def __init__(self, registry: TypeRegistry):
        self._registry = registry
        self._cache: Dict[str, ThrowableDescriptor] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def accepts_string(self, parameter_type: str) -> bool:
        """A String value can be passed to a slot of this type."""
        return self._registry.is_assignable(STRING, parameter_type)

    def accepts_throwable(self, parameter_type: str) -> bool:
        """The slot type is Throwable or one of its subtypes.

        This runs the opposite way to ``accepts_string``: an Object slot takes
        a message but never the cause.
        """
        return self._registry.is_assignable(parameter_type, THROWABLE)

    def is_checked(self, type_name: str) -> bool:
        """A type is checked unless it is a RuntimeException or an Error."""
        return not (
            self._registry.is_assignable(type_name, RUNTIME_EXCEPTION)
            or self._registry.is_assignable(type_name, ERROR)
        )

    def describe(self, type_name: str) -> ThrowableDescriptor:
        """Generic descriptor for ``type_name``.

        Raises:
            UnknownTypeError: If the type is not registered
        """
        descriptor = self._cache.get(type_name)
        if descriptor is not None:
            return descriptor
        with self._lock:
            descriptor = self._cache.get(type_name)
            if descriptor is None:
                descriptor = self._detect_shapes(self._registry.get(type_name))
                self._cache[type_name] = descriptor
        return descriptor

    def describe_for_method(self, type_name: str, method: MessageMethod) -> ThrowableDescriptor:
        """Method-scoped descriptor, with a construction binding if one exists.

        Methods without construction parameters never attempt a binding and
        get the generic descriptor back unchanged.
        """
        generic = self.describe(type_name)
        if not method.construction_parameters:
            return generic

        for constructor in self._registry.get(type_name).public_constructors():
            binding = self.bind(constructor, method)
            if binding is not None:
                return replace(
                    generic,
                    use_construction_binding=True,
                    construction_binding=binding,
                    bound_constructor=constructor,
                )
        return generic

    def bind(
        self, constructor: ConstructorDescriptor, method: MessageMethod
    ) -> Optional[tuple[Parameter, ...]]:
        """Greedy walk of one constructor's slots.

        Each slot, left to right, takes the first of:
        - the method's cause, once, if the slot accepts a Throwable
        - the synthetic message, once, if the slot accepts a String
        - the next unconsumed construction parameter, if assignable

        Returns:
            The bound parameters in slot order, or None when some slot could
            not be filled or no construction parameter was used
        """
        remaining = iter(method.construction_parameters)
        cause = method.cause
        cause_found = False
        message_found = False
        construction_found = False
        matched: list[Parameter] = []

        for slot_type in constructor.parameter_types:
            if not cause_found and cause is not None and self.accepts_throwable(slot_type):
                cause_found = True
                matched.append(cause)
                continue
            if not message_found and self.accepts_string(slot_type):
                message_found = True
                matched.append(Parameter.for_message())
                continue

            candidate = next(remaining, None)
            if candidate is None or not self._registry.is_assignable(candidate.type, slot_type):
                return None
            construction_found = True
            matched.append(candidate)

        if not construction_found:
            return None
        return tuple(matched)

    def _detect_shapes(self, descriptor: TypeDescriptor) -> ThrowableDescriptor:
        flags = {
            "has_default_constructor": False,
            "has_string_constructor": False,
            "has_throwable_constructor": False,
            "has_string_throwable_constructor": False,
            "has_throwable_string_constructor": False,
        }
        for constructor in descriptor.public_constructors():
            types = constructor.parameter_types
            if constructor.arity == 0:
                flags["has_default_constructor"] = True
            elif constructor.arity == 1:
                if self.accepts_string(types[0]):
                    flags["has_string_constructor"] = True
                elif self.accepts_throwable(types[0]):
                    flags["has_throwable_constructor"] = True
            elif constructor.arity == 2:
                if self.accepts_string(types[0]) and self.accepts_throwable(types[1]):
                    flags["has_string_throwable_constructor"] = True
                elif self.accepts_throwable(types[0]) and self.accepts_string(types[1]):
                    flags["has_throwable_string_constructor"] = True

        return ThrowableDescriptor(
            type_name=descriptor.name,
            is_checked=self.is_checked(descriptor.name),
            **flags,
        )
