from __future__ import annotations

import pytest
from pydantic import ValidationError

from miniconf.errors import KindChangeError
from miniconf.options import HIDDEN_OPTIONS, OptionRegistry, OptionSpec
from miniconf.types import TokenKind, ValueKind
from miniconf.value import ScalarValue


@pytest.fixture
def registry() -> OptionRegistry:
    return OptionRegistry(inject_hidden=False)


# ===========================================================================
# Builder
# ===========================================================================


class TestBuilder:
    def test_chained_declaration(self, registry):
        registry.declare("numOpt").shortflag("n").default_value(3.14).required(
            False
        ).description("A number value")
        spec = registry.find("numOpt")
        assert spec is not None
        assert spec.shortflag == "n"
        assert spec.default == ScalarValue(3.14)
        assert spec.kind is ValueKind.FLOAT
        assert spec.required is False
        assert spec.description == "A number value"

    def test_readers_mirror_setters(self, registry):
        opt = registry.declare("x").shortflag("x").description("d").default_value(1).hidden(True)
        assert opt.flag() == "x"
        assert opt.shortflag() == "x"
        assert opt.description() == "d"
        assert opt.default_value() == ScalarValue(1)
        assert opt.required() is False
        assert opt.hidden() is True
        assert opt.type() is ValueKind.INT

    def test_last_write_wins(self, registry):
        opt = registry.declare("s").default_value("a").default_value("b").shortflag("p").shortflag("q")
        assert opt.default_value() == ScalarValue("b")
        assert opt.shortflag() == "q"

    @pytest.mark.parametrize(
        ("raw", "kind"),
        [
            (ScalarValue(2), ValueKind.INT),
            (2, ValueKind.INT),
            (2.5, ValueKind.FLOAT),
            (True, ValueKind.BOOL),
            (b"chars", ValueKind.STRING),
            ("text", ValueKind.STRING),
        ],
    )
    def test_default_value_stamps_kind(self, registry, raw, kind):
        assert registry.declare("o").default_value(raw).type() is kind

    def test_default_is_copied(self, registry):
        source = ScalarValue(1)
        registry.declare("o").default_value(source)
        source.assign(2)
        assert registry.find("o").default.get_int() == 1

    def test_reading_default_returns_copy(self, registry):
        opt = registry.declare("o").default_value(1)
        opt.default_value().assign(9)
        assert opt.default_value().get_int() == 1

    def test_rename_rekeys_registry(self, registry):
        opt = registry.declare("old").default_value(1)
        opt.flag("new").shortflag("n")
        assert registry.find("old") is None
        assert registry.find("new").shortflag == "n"

    def test_builder_survives_other_declarations(self, registry):
        opt = registry.declare("a")
        for i in range(100):
            registry.declare(f"filler{i}")
        opt.default_value(5)
        assert registry.find("a").default.get_int() == 5

    def test_builder_of_removed_option_raises(self, registry):
        opt = registry.declare("a")
        registry.remove("a")
        with pytest.raises(KeyError):
            opt.shortflag("z")


class TestKindChange:
    def test_changing_kind_is_rejected(self, registry):
        opt = registry.declare("o").default_value(1)
        with pytest.raises(KindChangeError):
            opt.default_value("one")
        assert opt.type() is ValueKind.INT

    def test_same_kind_is_accepted(self, registry):
        opt = registry.declare("o").default_value("a")
        opt.default_value("another string")
        assert opt.default_value().get_string() == "another string"

    def test_redeclare_starts_fresh(self, registry):
        registry.declare("o").default_value(1)
        registry.declare("o").default_value("one")
        assert registry.find("o").kind is ValueKind.STRING


# ===========================================================================
# Spec model
# ===========================================================================


def test_empty_flag_is_invalid():
    with pytest.raises(ValidationError):
        OptionSpec(flag="")


def test_assignment_is_validated():
    spec = OptionSpec(flag="a")
    with pytest.raises(ValidationError):
        spec.flag = ""


def test_spec_without_default_has_unknown_kind():
    assert OptionSpec(flag="a").kind is ValueKind.UNKNOWN


# ===========================================================================
# Registry
# ===========================================================================


class TestRegistry:
    def test_declare_replaces(self, registry):
        registry.declare("a").shortflag("x").default_value(1)
        registry.declare("a")
        spec = registry.find("a")
        assert spec.shortflag == ""
        assert spec.default.is_empty()

    def test_option_gets_existing(self, registry):
        registry.option("a").shortflag("x").default_value(1)
        registry.option("a").description("adjusted")
        spec = registry.find("a")
        assert spec.shortflag == "x"
        assert spec.description == "adjusted"

    def test_remove(self, registry):
        registry.declare("a")
        assert registry.remove("a") is True
        assert registry.remove("a") is False
        assert "a" not in registry

    def test_find_missing(self, registry):
        assert registry.find("nope") is None

    def test_iteration_is_sorted(self, registry):
        for flag in ("b", "a.b", "a", "c"):
            registry.declare(flag)
        assert [s.flag for s in registry] == ["a", "a.b", "b", "c"]
        assert registry.flags() == ["a", "a.b", "b", "c"]
        assert len(registry) == 4

    def test_translate_short_flag(self, registry):
        registry.declare("verbose").shortflag("v")
        assert registry.translate_short_flag("v") == "verbose"

    def test_translate_unknown_short_flag_returns_input(self, registry):
        registry.declare("verbose").shortflag("v")
        assert registry.translate_short_flag("q") == "q"

    def test_empty_short_flag_matches_nothing(self, registry):
        registry.declare("count").default_value(1)
        assert registry.translate_short_flag("") == ""
        assert registry.resolve("", TokenKind.SHORTFLAG) is None

    def test_translate_picks_first_in_flag_order(self, registry):
        registry.declare("zeta").shortflag("z")
        registry.declare("alpha").shortflag("z")
        assert registry.translate_short_flag("z") == "alpha"

    def test_resolve(self, registry):
        registry.declare("verbose").shortflag("v")
        assert registry.resolve("v", TokenKind.SHORTFLAG).flag == "verbose"
        assert registry.resolve("verbose", TokenKind.FLAG).flag == "verbose"
        assert registry.resolve("v", TokenKind.FLAG) is None


class TestHiddenOptions:
    def test_injected_by_default(self):
        registry = OptionRegistry()
        assert [s.flag for s in registry] == ["config", "help"]
        assert all(s.hidden for s in registry)

    def test_injected_specs(self):
        registry = OptionRegistry()
        help_spec = registry.find("help")
        config_spec = registry.find("config")
        assert help_spec.shortflag == "h"
        assert help_spec.kind is ValueKind.BOOL
        assert config_spec.shortflag == "cfg"
        assert config_spec.kind is ValueKind.STRING

    def test_registries_do_not_share_hidden_specs(self):
        first = OptionRegistry()
        second = OptionRegistry()
        first.option("help").description("changed")
        assert second.find("help").description == HIDDEN_OPTIONS[0].description
