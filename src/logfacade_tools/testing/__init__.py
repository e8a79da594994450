"""Test helpers for projects that generate facade implementations.

Provides a registry of sample result types covering every constructor shape
the resolver distinguishes. The pytest plugin in ``pytest_fixtures`` wraps
it in fixtures.

Usage:
    from logfacade_tools.testing import sample_registry

    registry = sample_registry()
    registry.get("org.acme.QueryFailed")
"""

from logfacade_tools.model import (
    EXCEPTION,
    OBJECT,
    RUNTIME_EXCEPTION,
    STRING,
    THROWABLE,
    ConstructorDescriptor,
    TypeDescriptor,
    TypeRegistry,
)

__all__ = [
    "SAMPLE_PACKAGE",
    "SQL_EXCEPTION",
    "sample_registry",
]

SAMPLE_PACKAGE = "org.acme"
SQL_EXCEPTION = "java.sql.SQLException"


def _sample(name: str, supertype: str, *constructors: tuple) -> TypeDescriptor:
    return TypeDescriptor(
        f"{SAMPLE_PACKAGE}.{name}",
        supertypes=(supertype,),
        constructors=tuple(
            c if isinstance(c, ConstructorDescriptor) else ConstructorDescriptor(c)
            for c in constructors
        ),
    )


def sample_registry() -> TypeRegistry:
    """Builtins, ``java.sql.SQLException`` and sample types under ``org.acme``.

    ===================  ================  ===================================
    Type                 Extends           Public constructors
    ===================  ================  ===================================
    StringOnly           RuntimeException  (String)
    CauseOnly            Exception         (Throwable)
    CauseFirst           RuntimeException  (Throwable, String)
    DefaultOnly          Exception         ()
    QueryFailed          Exception         (String, Throwable, int),
                                           (String, int)
    PortInUse            RuntimeException  (int, String)
    Unbuildable          RuntimeException  (long, long); private (String)
    Unrelated            Object            (String)
    DbFailed             Exception         (String, java.sql.SQLException)
    Wrapped              RuntimeException  (String, Object)
    ===================  ================  ===================================
    """
    registry = TypeRegistry.with_builtins()
    registry.register(
        TypeDescriptor(
            SQL_EXCEPTION,
            supertypes=(EXCEPTION,),
            constructors=(ConstructorDescriptor((STRING,)), ConstructorDescriptor((THROWABLE,))),
        )
    )
    for descriptor in (
        _sample("StringOnly", RUNTIME_EXCEPTION, (STRING,)),
        _sample("CauseOnly", EXCEPTION, (THROWABLE,)),
        _sample("CauseFirst", RUNTIME_EXCEPTION, (THROWABLE, STRING)),
        _sample("DefaultOnly", EXCEPTION, ()),
        _sample("QueryFailed", EXCEPTION, (STRING, THROWABLE, "int"), (STRING, "int")),
        _sample("PortInUse", RUNTIME_EXCEPTION, ("int", STRING)),
        _sample(
            "Unbuildable",
            RUNTIME_EXCEPTION,
            ("long", "long"),
            ConstructorDescriptor((STRING,), public=False),
        ),
        _sample("Unrelated", OBJECT, (STRING,)),
        _sample("DbFailed", EXCEPTION, (STRING, SQL_EXCEPTION)),
        _sample("Wrapped", RUNTIME_EXCEPTION, (STRING, OBJECT)),
    ):
        registry.register(descriptor)
    return registry
