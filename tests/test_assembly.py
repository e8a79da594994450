"""Tests for logger method argument assembly."""

import pytest

from logfacade_tools.codegen import (
    NULL,
    FormatArguments,
    Helper,
    Invoke,
    LevelRef,
    LocalBinding,
    LocalNameAllocator,
    New,
    Ref,
    assemble_logger_call,
    build_format_arguments,
)
from logfacade_tools.exceptions import ModelViolationError
from logfacade_tools.model import (
    LogLevel,
    Message,
    MessageFormat,
    MessageMethod,
    Parameter,
    TransformOp,
)


def logger_method(*params, fmt=MessageFormat.PRINTF, level=LogLevel.INFO, name="greet"):
    return MessageMethod(
        name=name,
        return_type="void",
        message=Message("template", fmt),
        parameters=params,
        log_level=level,
    )


class TestLocalNameAllocator:
    """Tests for collision-free local names."""

    def test_free_name_is_used(self):
        assert LocalNameAllocator({"items"}).allocate("items_size") == "items_size"

    def test_collision_with_parameter(self):
        """Test that a declared parameter name is never reused."""
        allocator = LocalNameAllocator({"items", "items_size", "items_size_1"})
        assert allocator.allocate("items_size") == "items_size_2"

    def test_collision_with_earlier_allocation(self):
        """Test that two allocations of the same base differ."""
        allocator = LocalNameAllocator(set())
        assert allocator.allocate("x") == "x"
        assert allocator.allocate("x") == "x_1"
        assert allocator.allocated == ("x", "x_1")
        assert allocator.is_taken("x_1")


class TestNoFormat:
    """Tests for NO_FORMAT logger methods."""

    def test_five_slots(self):
        """Test [fqcn, level, message, null, cause-or-null] without a cause."""
        call = assemble_logger_call(logger_method(fmt=MessageFormat.NO_FORMAT))

        assert call.primitive == "log"
        assert call.arguments == (
            Ref("FQCN"),
            LevelRef(LogLevel.INFO),
            Invoke("greet$str"),
            NULL,
            NULL,
        )
        assert call.locals == ()

    def test_five_slots_with_cause(self):
        """Test that the cause lands in the last slot."""
        call = assemble_logger_call(
            logger_method(Parameter.cause("e"), fmt=MessageFormat.NO_FORMAT, level=LogLevel.ERROR)
        )

        assert len(call.arguments) == 5
        assert call.arguments[1] == LevelRef(LogLevel.ERROR)
        assert call.arguments[3] == NULL
        assert call.arguments[4] == Ref("e")

    def test_ignores_format_parameters(self):
        """Test that a broken model still yields exactly five slots."""
        call = assemble_logger_call(
            logger_method(Parameter.format("x"), fmt=MessageFormat.NO_FORMAT)
        )

        assert len(call.arguments) == 5
        assert Ref("x") not in call.arguments

    def test_render(self):
        call = assemble_logger_call(logger_method(fmt=MessageFormat.NO_FORMAT))
        assert call.render() == "log.log(FQCN, Level.INFO, greet$str(), null, null)"


class TestFormatted:
    """Tests for formatted logger methods."""

    def test_prefix_order(self):
        """Test [fqcn, level, cause-or-null, template, ...]."""
        call = assemble_logger_call(
            logger_method(Parameter.format("name", "String"), Parameter.cause("e"))
        )

        assert call.primitive == "logf"
        assert call.arguments == (
            Ref("FQCN"),
            LevelRef(LogLevel.INFO),
            Ref("e"),
            Invoke("greet$str"),
            Ref("name"),
        )

    def test_message_format_primitive(self):
        call = assemble_logger_call(
            logger_method(Parameter.format("name"), fmt=MessageFormat.MESSAGE_FORMAT)
        )
        assert call.primitive == "logv"
        assert call.arguments[2] == NULL

    def test_render(self):
        call = assemble_logger_call(logger_method(Parameter.format("name", "String")))
        assert call.render() == "log.logf(FQCN, Level.INFO, null, greet$str(), name)"

    def test_fqcn_parameter(self):
        """Test that a declared FQCN parameter replaces the constant."""
        call = assemble_logger_call(logger_method(Parameter.fqcn("caller"), Parameter.format("x")))

        assert call.arguments[0] == Invoke("getName", target=Ref("caller"))
        assert call.arguments[4:] == (Ref("x"),)

    def test_custom_fqcn_and_logger(self):
        call = assemble_logger_call(
            logger_method(Parameter.format("x")), fqcn=Ref("LOGGING_FQCN"), logger=Ref("super.log")
        )
        assert call.render().startswith("super.log.logf(LOGGING_FQCN, ")

    def test_non_logger_method_rejected(self):
        with pytest.raises(ModelViolationError):
            assemble_logger_call(logger_method(level=None))


class TestFormatArguments:
    """Tests for the format argument tail."""

    def test_format_roles(self):
        """Test bare, array, varargs and formatter-wrapped values."""
        args = build_format_arguments(
            logger_method(
                Parameter.format("plain"),
                Parameter.format("arr", "Object[]"),
                Parameter.format("rest", "Object", is_varargs=True),
                Parameter.format("when", "Date", formatter_type="org.acme.DateRenderer"),
            )
        )

        assert args.args == (
            Ref("plain"),
            Helper("array_to_string", (Ref("arr"),)),
            Helper("array_to_string", (Ref("rest"),)),
            New("org.acme.DateRenderer", (Ref("when"),)),
        )
        assert args.locals == ()

    def test_transform_binds_local(self):
        """Test that a transform yields a local and a reference to it."""
        args = build_format_arguments(
            logger_method(Parameter.transform("items", TransformOp.SIZE, "List"))
        )

        assert args.args == (Ref("items_size"),)
        assert args.locals == (LocalBinding("items_size", Helper("size_of", (Ref("items"),))),)
        assert args.locals[0].render() == "items_size = size_of(items)"

    def test_transform_with_formatter(self):
        args = build_format_arguments(
            logger_method(
                Parameter.transform("obj", TransformOp.TYPE, formatter_type="org.acme.Pretty")
            )
        )
        assert args.args == (New("org.acme.Pretty", (Ref("obj_type"),)),)

    def test_transform_local_avoids_parameter_names(self):
        """Test that the transform local never shadows a declared parameter."""
        args = build_format_arguments(
            logger_method(
                Parameter.transform("items", TransformOp.SIZE),
                Parameter.format("items_size", "int"),
            )
        )

        assert args.locals[0].name == "items_size_1"
        assert args.args == (Ref("items_size_1"), Ref("items_size"))

    def test_non_format_roles_contribute_nothing(self):
        args = build_format_arguments(
            logger_method(
                Parameter.cause(),
                Parameter.fqcn(),
                Parameter.construction("port", "int"),
                Parameter.for_message(),
            )
        )
        assert args == FormatArguments((), ())

    def test_slot_count(self):
        """Test one slot per format/transform parameter, one per position."""
        args = build_format_arguments(
            logger_method(
                Parameter.format("a"),
                Parameter.transform("b", TransformOp.STRING),
                Parameter.positional("c", (1, 4, 2)),
                Parameter.cause(),
            )
        )
        assert len(args.args) == 5

    def test_positional_declaration_order(self):
        """Test P1(pos=2), P2(pos=1) gives [P2, P1]."""
        args = build_format_arguments(
            logger_method(Parameter.positional("p1", (2,)), Parameter.positional("p2", (1,)))
        )
        assert args.args == (Ref("p2"), Ref("p1"))

    def test_positional_insert_or_append(self):
        """Test that out-of-range positions append and in-range ones insert."""
        args = build_format_arguments(
            logger_method(
                Parameter.format("a"),
                Parameter.positional("p", (5, 1)),
            )
        )
        # pos 5 -> append: [a, p]; pos 1 -> insert at 0: [p, a, p]
        assert args.args == (Ref("p"), Ref("a"), Ref("p"))

    def test_positional_is_not_sorted(self):
        """Test that processing order, not position order, decides ties."""
        args = build_format_arguments(
            logger_method(
                Parameter.positional("x", (3,)),
                Parameter.positional("y", (2,)),
                Parameter.positional("z", (1,)),
            )
        )
        # x appended, y appended (index 1 == len), z inserted at 0
        assert args.args == (Ref("z"), Ref("x"), Ref("y"))

    def test_positional_with_transforms(self):
        """Test per-position transforms bind their own locals."""
        args = build_format_arguments(
            logger_method(
                Parameter.positional("obj", (1, 2), (TransformOp.TYPE, None)),
            )
        )

        assert args.args == (Ref("obj_type"), Ref("obj"))
        assert [b.name for b in args.locals] == ["obj_type"]

    def test_positional_same_transform_twice(self):
        """Test that repeated transforms get distinct locals."""
        args = build_format_arguments(
            logger_method(
                Parameter.positional(
                    "obj", (1, 2), (TransformOp.HASH_CODE, TransformOp.HASH_CODE)
                ),
            )
        )
        assert [b.name for b in args.locals] == ["obj_hash_code", "obj_hash_code_1"]

    def test_unknown_role_rejected(self):
        method = logger_method(Parameter("odd", "Object", role=object()))
        with pytest.raises(ModelViolationError):
            build_format_arguments(method)


class TestEndToEnd:
    """A formatted method with a cause, a size transform and a positional."""

    def test_positional_pushes_transform(self):
        method = logger_method(
            Parameter.cause("e"),
            Parameter.transform("items", TransformOp.SIZE, "List"),
            Parameter.positional("first", (1,)),
            level=LogLevel.WARN,
            name="batchFailed",
        )

        call = assemble_logger_call(method)

        assert call.arguments == (
            Ref("FQCN"),
            LevelRef(LogLevel.WARN),
            Ref("e"),
            Invoke("batchFailed$str"),
            Ref("first"),
            Ref("items_size"),
        )
        assert call.locals == (
            LocalBinding("items_size", Helper("size_of", (Ref("items"),))),
        )
        assert call.render() == (
            "log.logf(FQCN, Level.WARN, e, batchFailed$str(), first, items_size)"
        )
