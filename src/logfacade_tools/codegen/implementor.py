"""Facade implementation assembly.

Walks every method of a MessageInterface and decides how its body is
built:

- logger methods get one primitive call from the argument assembly
- bundle methods return (or throw) either the formatted message or a value
  built through the constructor resolver

and, once per interface, generates the delegating method matrix when the
interface extends the basic logger but cannot inherit the delegating base.

Errors are contained per method: a method that cannot be implemented is
logged and recorded in ``FacadeImplementation.failures`` and the rest of the
interface is still generated.

Example:
    implementation = FacadeImplementor(interface, registry=registry).implement()
    for implemented in implementation.methods:
        print(implemented.render())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union

from logfacade_tools.codegen.assembly import (
    FQCN_FIELD,
    LOG_FIELD,
    LocalBinding,
    LocalNameAllocator,
    LoggerCall,
    assemble_logger_call,
    build_format_arguments,
)
from logfacade_tools.codegen.delegation import DelegatingMethod, generate_delegating_methods
from logfacade_tools.codegen.expressions import (
    FORMAT,
    MESSAGE_FORMAT,
    NULL,
    Expression,
    Helper,
    Invoke,
    New,
    Ref,
)
from logfacade_tools.codegen.resolver import ConstructorResolver, ThrowableDescriptor
from logfacade_tools.config import GeneratorSettings
from logfacade_tools.exceptions import (
    LogFacadeError,
    ModelViolationError,
    UnresolvableConstructorError,
)
from logfacade_tools.logger import Logger, create_logger_from_settings
from logfacade_tools.model import (
    STRING,
    CauseRole,
    ConstructionRole,
    MessageFormat,
    MessageInterface,
    MessageMethod,
    MessageRole,
    Parameter,
    TypeRegistry,
)

LOGGER_SUFFIX = "_$logger"
BUNDLE_SUFFIX = "_$bundle"
DELEGATING_BASE_LOGGER = Ref("super.log")
INIT_CAUSE = "initCause"


class ConstructorShape(Enum):
    """How a bundle method's result value is constructed."""

    BOUND = "bound"
    STRING_THROWABLE = "string_throwable"
    THROWABLE_STRING = "throwable_string"
    STRING = "string"
    THROWABLE = "throwable"
    DEFAULT = "default"


class BundleAction(Enum):
    RETURN = "return"
    THROW = "throw"


@dataclass(frozen=True)
class LoggerMethodBody:
    call: LoggerCall

    def render(self) -> str:
        lines = [binding.render() for binding in self.call.locals]
        lines.append(self.call.render())
        return "; ".join(lines)


@dataclass(frozen=True)
class BundleMethodBody:
    """Body of a message or exception building method.

    Attributes:
        action: Whether ``result`` is returned or thrown
        result: Expression of the value produced
        locals: Locals to declare first, in order
        statements: Calls made after the locals (e.g. attaching a cause)
        shape: Constructor shape used, None for plain message results
        descriptor: Resolver output for constructed results
    """

    action: BundleAction
    result: Expression
    locals: tuple[LocalBinding, ...] = ()
    statements: tuple[Expression, ...] = ()
    shape: Optional[ConstructorShape] = None
    descriptor: Optional[ThrowableDescriptor] = None

    def render(self) -> str:
        lines = [binding.render() for binding in self.locals]
        lines.extend(statement.render() for statement in self.statements)
        lines.append(f"{self.action.value} {self.result.render()}")
        return "; ".join(lines)


MethodBody = Union[LoggerMethodBody, BundleMethodBody]


@dataclass(frozen=True)
class ImplementedMethod:
    method: MessageMethod
    body: MethodBody

    @property
    def name(self) -> str:
        return self.method.name

    def render(self) -> str:
        params = ", ".join(f"{p.type} {p.name}" for p in self.method.parameters)
        return f"{self.method.return_type} {self.name}({params}) {{ {self.body.render()} }}"


@dataclass(frozen=True)
class MethodFailure:
    method_name: str
    error: LogFacadeError

    def to_dict(self) -> dict:
        return {"method": self.method_name, **self.error.to_dict()}


@dataclass
class FacadeImplementation:
    """Everything a printer needs to write one implementation class."""

    interface: MessageInterface
    class_name: str
    fqcn: str
    extends_delegating_base: bool = False
    logger_expression: Expression = Ref(LOG_FIELD)
    methods: list[ImplementedMethod] = field(default_factory=list)
    delegating_methods: list[DelegatingMethod] = field(default_factory=list)
    failures: list[MethodFailure] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        package = self.interface.package_name
        return f"{package}.{self.class_name}" if package else self.class_name

    @property
    def succeeded(self) -> bool:
        return not self.failures

    def method(self, name: str) -> ImplementedMethod:
        for implemented in self.methods:
            if implemented.name == name:
                return implemented
        raise KeyError(name)


class FacadeImplementor:
    """Builds the implementation model of one facade interface."""

    def __init__(
        self,
        interface: MessageInterface,
        settings: Optional[GeneratorSettings] = None,
        registry: Optional[TypeRegistry] = None,
        resolver: Optional[ConstructorResolver] = None,
        logger: Optional[Logger] = None,
    ):
        self.interface = interface
        self.settings = settings or GeneratorSettings()
        if resolver is None:
            resolver = ConstructorResolver(registry or TypeRegistry.with_builtins())
        self.resolver = resolver
        if logger is None:
            logger = create_logger_from_settings(self.settings.log)
        self._log = logger.bind(interface=interface.qualified_name)

    @property
    def is_logger(self) -> bool:
        return self.interface.extends_basic_logger or self.interface.has_logger_methods

    @property
    def extends_delegating_base(self) -> bool:
        return self.interface.extends_basic_logger and self.settings.use_delegating_base

    def implement(self) -> FacadeImplementation:
        suffix = LOGGER_SUFFIX if self.is_logger else BUNDLE_SUFFIX
        implementation = FacadeImplementation(
            interface=self.interface,
            class_name=f"{self.interface.simple_name}{suffix}",
            fqcn="",
            extends_delegating_base=self.extends_delegating_base,
        )
        implementation.fqcn = (
            self.interface.logging_fqcn
            or self.settings.logging_fqcn
            or implementation.qualified_name
        )
        if self.extends_delegating_base:
            implementation.logger_expression = DELEGATING_BASE_LOGGER
        elif self.interface.extends_basic_logger:
            implementation.delegating_methods = generate_delegating_methods(
                Ref(FQCN_FIELD), implementation.logger_expression
            )
            self._log.debug(
                "Generated delegating methods",
                count=len(implementation.delegating_methods),
            )

        for method in self.interface.all_methods():
            method_log = self._log.bind(method=method.name)
            try:
                method.validate()
            except ModelViolationError as exc:
                method_log.warning(
                    "Method model is inconsistent", error_code=exc.code, error=exc.message
                )

            try:
                body = self._implement_method(method, implementation.logger_expression)
            except LogFacadeError as exc:
                method_log.error(
                    "Could not implement method",
                    error_code=exc.code,
                    error=exc.message,
                    details=exc.details,
                )
                implementation.failures.append(MethodFailure(method.name, exc))
                continue

            implementation.methods.append(ImplementedMethod(method, body))
            method_log.debug("Implemented method", kind=type(body).__name__)

        self._log.info(
            "Implemented interface",
            class_name=implementation.class_name,
            methods=len(implementation.methods),
            failures=len(implementation.failures),
        )
        return implementation

    def _implement_method(self, method: MessageMethod, logger: Expression) -> MethodBody:
        if method.is_logger_method:
            return LoggerMethodBody(assemble_logger_call(method, Ref(FQCN_FIELD), logger))
        return self._implement_bundle_method(method)

    def _implement_bundle_method(self, method: MessageMethod) -> BundleMethodBody:
        allocator = LocalNameAllocator(method.parameter_names)
        message, message_locals = self._message_expression(method, allocator)
        action = BundleAction.THROW if method.thrown_type else BundleAction.RETURN
        result_type = method.thrown_type or method.return_type

        if result_type == STRING:
            return BundleMethodBody(action, message, message_locals)

        descriptor = self.resolver.describe_for_method(result_type, method)
        if descriptor.use_construction_binding:
            shape = ConstructorShape.BOUND
            args = tuple(
                self._bound_argument(param, message) for param in descriptor.construction_binding
            )
            cause_attached = method.cause in descriptor.construction_binding
        else:
            shape, args, cause_attached = self._fallback_construction(method, descriptor, message)

        result_name = allocator.allocate("result")
        result = Ref(result_name)
        statements: tuple[Expression, ...] = ()
        if method.cause is not None and not cause_attached:
            statements = (Invoke(INIT_CAUSE, (Ref(method.cause.name),), result),)

        return BundleMethodBody(
            action=action,
            result=result,
            locals=message_locals + (LocalBinding(result_name, New(result_type, args)),),
            statements=statements,
            shape=shape,
            descriptor=descriptor,
        )

    def _message_expression(
        self, method: MessageMethod, allocator: LocalNameAllocator
    ) -> tuple[Expression, tuple[LocalBinding, ...]]:
        template = Invoke(method.message_accessor)
        if not method.message_format.is_formatted:
            return template, ()
        format_args = build_format_arguments(method, allocator)
        helper = MESSAGE_FORMAT if method.message_format is MessageFormat.MESSAGE_FORMAT else FORMAT
        return Helper(helper, (template,) + format_args.args), format_args.locals

    @staticmethod
    def _bound_argument(param: Parameter, message: Expression) -> Expression:
        if isinstance(param.role, MessageRole):
            return message
        if isinstance(param.role, (CauseRole, ConstructionRole)):
            return Ref(param.name)
        raise ModelViolationError(
            f"Parameter '{param.name}' cannot be bound to a constructor",
            details={"parameter": param.name, "role": param.role_kind},
        )

    @staticmethod
    def _fallback_construction(
        method: MessageMethod, descriptor: ThrowableDescriptor, message: Expression
    ) -> tuple[ConstructorShape, tuple[Expression, ...], bool]:
        """Pick a well-known constructor shape.

        Returns:
            The shape, the constructor arguments and whether the cause was
            passed to the constructor
        """
        cause = method.cause
        if cause is not None:
            cause_ref = Ref(cause.name)
            if descriptor.has_string_throwable_constructor:
                return ConstructorShape.STRING_THROWABLE, (message, cause_ref), True
            if descriptor.has_throwable_string_constructor:
                return ConstructorShape.THROWABLE_STRING, (cause_ref, message), True
            if descriptor.has_string_constructor:
                return ConstructorShape.STRING, (message,), False
            if descriptor.has_throwable_constructor:
                return ConstructorShape.THROWABLE, (cause_ref,), True
            if descriptor.has_default_constructor:
                return ConstructorShape.DEFAULT, (), False
        else:
            if descriptor.has_string_constructor:
                return ConstructorShape.STRING, (message,), False
            if descriptor.has_string_throwable_constructor:
                return ConstructorShape.STRING_THROWABLE, (message, NULL), False
            if descriptor.has_throwable_string_constructor:
                return ConstructorShape.THROWABLE_STRING, (NULL, message), False
            if descriptor.has_default_constructor:
                return ConstructorShape.DEFAULT, (), False
            if descriptor.has_throwable_constructor:
                return ConstructorShape.THROWABLE, (NULL,), False

        raise UnresolvableConstructorError(
            f"No usable constructor found on '{descriptor.type_name}'",
            details={"method": method.name, "type": descriptor.type_name},
        )


def implement_all(
    interfaces: Iterable[MessageInterface],
    settings: Optional[GeneratorSettings] = None,
    registry: Optional[TypeRegistry] = None,
    logger: Optional[Logger] = None,
) -> list[FacadeImplementation]:
    """Implement several interfaces sharing one resolver cache."""
    settings = settings or GeneratorSettings()
    resolver = ConstructorResolver(registry or TypeRegistry.with_builtins())
    log = logger or create_logger_from_settings(settings.log)
    return [
        FacadeImplementor(interface, settings, resolver=resolver, logger=log).implement()
        for interface in interfaces
    ]
