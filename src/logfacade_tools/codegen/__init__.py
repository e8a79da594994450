"""Implementation model synthesis for facade interfaces.

Usage:
    from logfacade_tools.codegen import FacadeImplementor, assemble_logger_call

    # One logger method
    call = assemble_logger_call(method)
    call.render()  # log.logf(FQCN, Level.INFO, null, greet$str(), name)

    # A whole interface
    implementation = FacadeImplementor(interface).implement()
"""

from logfacade_tools.codegen.assembly import (
    FQCN_FIELD,
    LOG_FIELD,
    NAME_ACCESSOR,
    FormatArguments,
    LocalBinding,
    LocalNameAllocator,
    LoggerCall,
    assemble_logger_call,
    build_format_arguments,
    cause_argument,
    fqcn_argument,
    transform_expression,
)
from logfacade_tools.codegen.delegation import (
    DelegatingMethod,
    ParameterSpec,
    RenderMode,
    expected_method_count,
    generate_delegating_methods,
)
from logfacade_tools.codegen.expressions import (
    NULL,
    Expression,
    Helper,
    Invoke,
    LevelRef,
    New,
    Null,
    Ref,
)
from logfacade_tools.codegen.implementor import (
    BUNDLE_SUFFIX,
    LOGGER_SUFFIX,
    BundleAction,
    BundleMethodBody,
    ConstructorShape,
    FacadeImplementation,
    FacadeImplementor,
    ImplementedMethod,
    LoggerMethodBody,
    MethodFailure,
    implement_all,
)
from logfacade_tools.codegen.resolver import ConstructorResolver, ThrowableDescriptor

__all__ = [
    # Expressions
    "Expression",
    "Ref",
    "Null",
    "NULL",
    "LevelRef",
    "Invoke",
    "New",
    "Helper",
    # Argument assembly
    "FQCN_FIELD",
    "LOG_FIELD",
    "NAME_ACCESSOR",
    "FormatArguments",
    "LocalBinding",
    "LocalNameAllocator",
    "LoggerCall",
    "assemble_logger_call",
    "build_format_arguments",
    "cause_argument",
    "fqcn_argument",
    "transform_expression",
    # Delegating matrix
    "DelegatingMethod",
    "ParameterSpec",
    "RenderMode",
    "expected_method_count",
    "generate_delegating_methods",
    # Constructor resolution
    "ConstructorResolver",
    "ThrowableDescriptor",
    # Implementation assembly
    "FacadeImplementor",
    "FacadeImplementation",
    "ImplementedMethod",
    "LoggerMethodBody",
    "BundleMethodBody",
    "BundleAction",
    "ConstructorShape",
    "MethodFailure",
    "LOGGER_SUFFIX",
    "BUNDLE_SUFFIX",
    "implement_all",
]
