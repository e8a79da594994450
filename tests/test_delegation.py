"""Tests for the delegating method matrix."""

from collections import Counter

import pytest

from logfacade_tools.codegen import (
    NULL,
    Invoke,
    LevelRef,
    Ref,
    RenderMode,
    expected_method_count,
    generate_delegating_methods,
)
from logfacade_tools.model import LogLevel


@pytest.fixture(scope="module")
def methods():
    return generate_delegating_methods()


def _find(methods, name, *types):
    matches = [m for m in methods if m.signature == (name, tuple(types))]
    assert len(matches) == 1, f"{name}{types} found {len(matches)} times"
    return matches[0]


class TestMatrixShape:
    """Tests for the size and uniqueness of the matrix."""

    def test_total_count(self, methods):
        """Test 3 + 6*4 + 6*2*2*4 + 1 + 4 + 2*3*4 methods."""
        assert expected_method_count() == 152
        assert len(methods) == 152

    def test_signatures_are_distinct(self, methods):
        signatures = Counter(m.signature for m in methods)
        assert [s for s, n in signatures.items() if n > 1] == []

    def test_enabled_queries(self, methods):
        """Test that only TRACE, DEBUG and INFO get an is-enabled query."""
        names = {m.name for m in methods if m.return_type == "boolean"}
        assert names == {"isTraceEnabled", "isDebugEnabled", "isInfoEnabled", "isEnabled"}

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_per_level_counts(self, methods, level):
        """Test 4 raw plus 8 overloads per affix for every level."""
        by_name = Counter(m.name for m in methods)
        assert by_name[level.lowered] == 4
        assert by_name[f"{level.lowered}v"] == 8
        assert by_name[f"{level.lowered}f"] == 8

    def test_level_parametric_counts(self, methods):
        by_name = Counter(m.name for m in methods)
        assert by_name["log"] == 4
        assert by_name["logv"] == 12
        assert by_name["logf"] == 12

    def test_render_modes(self):
        """Test there is no FQCN-without-throwable mode."""
        assert [(m.include_throwable, m.include_fqcn) for m in RenderMode] == [
            (False, False),
            (True, False),
            (True, True),
        ]

    def test_deterministic(self, methods):
        assert generate_delegating_methods() == methods


class TestForwarding:
    """Tests for the call each overload forwards to."""

    def test_enabled_query(self, methods):
        method = _find(methods, "isDebugEnabled")
        assert method.returns
        assert method.call == Invoke("isDebugEnabled", target=Ref("log"))

    def test_is_enabled(self, methods):
        method = _find(methods, "isEnabled", "Level")
        assert method.call == Invoke("isEnabled", (Ref("level"),), Ref("log"))

    def test_raw_message(self, methods):
        method = _find(methods, "info", "Object")
        assert not method.returns
        assert method.call.render() == "log.info(FQCN, message, null)"

    def test_raw_message_cause(self, methods):
        method = _find(methods, "warn", "Object", "Throwable")
        assert method.call.render() == "log.warn(FQCN, message, t)"

    def test_raw_with_fqcn(self, methods):
        method = _find(methods, "error", "String", "Object", "Throwable")
        assert method.call.render() == "log.error(loggerFqcn, message, t)"

    def test_raw_with_params(self, methods):
        method = _find(methods, "fatal", "String", "Object", "Object[]", "Throwable")
        assert method.call.render() == "log.fatal(loggerFqcn, message, params, t)"

    def test_level_varargs(self, methods):
        method = _find(methods, "debugf", "String", "Object...")
        assert method.call == Invoke(
            "logf",
            (Ref("FQCN"), LevelRef(LogLevel.DEBUG), NULL, Ref("format"), Ref("params")),
            Ref("log"),
        )

    def test_level_fixed_arity_with_cause(self, methods):
        method = _find(methods, "tracev", "Throwable", "String", "Object", "Object", "Object")
        assert method.call.render() == (
            "log.logv(FQCN, Level.TRACE, t, format, param1, param2, param3)"
        )

    def test_raw_log(self, methods):
        assert _find(methods, "log", "Level", "Object").call.render() == (
            "log.log(FQCN, level, message, null, null)"
        )
        assert _find(methods, "log", "Level", "Object", "Throwable").call.render() == (
            "log.log(FQCN, level, message, null, t)"
        )
        assert _find(methods, "log", "Level", "String", "Object", "Throwable").call.render() == (
            "log.log(level, loggerFqcn, message, t)"
        )
        assert _find(
            methods, "log", "String", "Level", "Object", "Object[]", "Throwable"
        ).call.render() == "log.log(loggerFqcn, level, message, params, t)"

    def test_level_parametric_none(self, methods):
        method = _find(methods, "logf", "Level", "String", "Object")
        assert method.call.render() == "log.logf(FQCN, level, null, format, param1)"

    def test_level_parametric_cause(self, methods):
        method = _find(methods, "logv", "Level", "Throwable", "String", "Object...")
        assert method.call.render() == "log.logv(FQCN, level, t, format, params)"

    def test_level_parametric_fqcn(self, methods):
        method = _find(methods, "logf", "String", "Level", "Throwable", "String", "Object", "Object")
        assert method.call.render() == "log.logf(loggerFqcn, level, t, format, param1, param2)"

    def test_custom_fqcn_and_delegate(self):
        methods = generate_delegating_methods(Ref("LOGGING_FQCN"), Ref("delegate"))
        method = _find(methods, "infof", "String", "Object")
        assert method.call.render() == (
            "delegate.logf(LOGGING_FQCN, Level.INFO, null, format, param1)"
        )

    def test_render_signature(self, methods):
        method = _find(methods, "errorf", "Throwable", "String", "Object...")
        assert method.render() == (
            "void errorf(Throwable t, String format, Object... params) -> "
            "log.logf(FQCN, Level.ERROR, t, format, params)"
        )
