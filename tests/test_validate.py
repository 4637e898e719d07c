from __future__ import annotations

import pytest

from miniconf.diagnostics import DiagnosticLog
from miniconf.options import OptionRegistry
from miniconf.types import DiagnosticCode, LogLevel
from miniconf.validate import check_format, should_abort, validate
from miniconf.value import ScalarValue
from miniconf.values import ResolvedValues


@pytest.fixture
def registry() -> OptionRegistry:
    return OptionRegistry()


def _complete(registry: OptionRegistry, flag: str, short: str, default) -> None:
    registry.declare(flag).shortflag(short).default_value(default).description(f"{flag} option")


# ===========================================================================
# check_format
# ===========================================================================


class TestCheckFormat:
    def test_clean_registry_is_info(self, registry):
        _complete(registry, "a", "a", 1)
        log = DiagnosticLog()
        assert check_format(registry, "prog", log) is LogLevel.INFO
        assert len(log) == 0

    def test_duplicate_short_flag_is_error(self, registry):
        _complete(registry, "alpha", "x", 1)
        _complete(registry, "beta", "x", 2)
        log = DiagnosticLog()
        assert check_format(registry, "prog", log) is LogLevel.ERROR
        errors = log.filter(LogLevel.ERROR)
        assert {e.flag for e in errors} == {"alpha", "beta"}
        assert all(e.code is DiagnosticCode.FORMAT for e in errors)

    def test_optional_without_default_is_error(self, registry):
        registry.declare("a").shortflag("a").description("d")
        log = DiagnosticLog()
        assert check_format(registry, "prog", log) is LogLevel.ERROR

    def test_required_without_default_is_fine(self, registry):
        registry.declare("a").shortflag("a").description("d").required(True)
        log = DiagnosticLog()
        assert check_format(registry, "prog", log) is LogLevel.INFO

    def test_missing_description_and_short_flag_warn(self, registry):
        registry.declare("a").default_value(1)
        log = DiagnosticLog()
        assert check_format(registry, "prog", log) is LogLevel.WARNING
        assert [e.message for e in log] == ["no description", "no short flag"]

    def test_missing_program_description_warns_once(self, registry):
        _complete(registry, "a", "a", 1)
        _complete(registry, "b", "b", 1)
        log = DiagnosticLog()
        assert check_format(registry, "", log) is LogLevel.WARNING
        assert [e.message for e in log] == ["no program description"]

    def test_worst_ignores_earlier_entries(self, registry):
        _complete(registry, "a", "a", 1)
        log = DiagnosticLog()
        log.error("x", "earlier problem", DiagnosticCode.VALUE)
        assert check_format(registry, "prog", log) is LogLevel.INFO


# ===========================================================================
# validate
# ===========================================================================


class TestValidate:
    def test_defaults_are_valid(self, registry):
        _complete(registry, "a", "a", 1)
        values = ResolvedValues()
        values.seed(registry)
        assert validate(registry, values, DiagnosticLog()) is LogLevel.INFO

    def test_hidden_options_are_purged(self, registry):
        values = ResolvedValues()
        values.seed(registry)
        assert "help" in values
        validate(registry, values, DiagnosticLog())
        assert "help" not in values
        assert "config" not in values

    def test_hidden_options_never_undefined(self, registry):
        values = ResolvedValues()
        log = DiagnosticLog()
        assert validate(registry, values, log) is LogLevel.INFO

    def test_required_without_value_is_error(self, registry):
        registry.declare("needed").required(True)
        values = ResolvedValues()
        values.seed(registry)
        log = DiagnosticLog()
        assert validate(registry, values, log) is LogLevel.ERROR
        assert log[0].flag == "needed"
        assert log[0].code is DiagnosticCode.UNDEFINED_OPTION

    def test_absent_option_is_error(self, registry):
        _complete(registry, "a", "a", 1)
        log = DiagnosticLog()
        assert validate(registry, ResolvedValues(), log) is LogLevel.ERROR
        assert log[0].message == "option is undefined"

    def test_empty_stray_value_is_error(self, registry):
        values = ResolvedValues({"stray": ScalarValue.unknown()})
        log = DiagnosticLog()
        assert validate(registry, values, log) is LogLevel.ERROR
        assert log[0].code is DiagnosticCode.VALUE

    def test_strays_with_values_are_fine(self, registry):
        values = ResolvedValues({"stray": ScalarValue("x")})
        assert validate(registry, values, DiagnosticLog()) is LogLevel.INFO


@pytest.mark.parametrize(
    ("severity", "level", "abort"),
    [
        (LogLevel.ERROR, LogLevel.INFO, True),
        (LogLevel.ERROR, LogLevel.WARNING, True),
        (LogLevel.ERROR, LogLevel.ERROR, True),
        (LogLevel.ERROR, LogLevel.NONE, False),
        (LogLevel.WARNING, LogLevel.INFO, False),
        (LogLevel.INFO, LogLevel.INFO, False),
    ],
)
def test_should_abort(severity, level, abort):
    assert should_abort(severity, level) is abort
