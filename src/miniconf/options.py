"""Option declarations and the registry that owns them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import KindChangeError
from .types import TokenKind, ValueKind
from .value import ScalarValue

HELP_FLAG = "help"
CONFIG_FLAG = "config"


class OptionSpec(BaseModel):
    """Metadata for one declared option.

    The kind of ``default`` is the option's declared kind: every token or
    file value bound to this option is coerced to it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    flag: str = Field(min_length=1)
    shortflag: str = ""
    description: str = ""
    default: ScalarValue = Field(default_factory=ScalarValue.unknown)
    required: bool = False
    hidden: bool = False

    @property
    def kind(self) -> ValueKind:
        return self.default.kind


# Options every registry starts with, unless built with ``inject_hidden=False``.
HIDDEN_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        flag=HELP_FLAG,
        shortflag="h",
        description="Print this help message",
        default=ScalarValue(False),
        hidden=True,
    ),
    OptionSpec(
        flag=CONFIG_FLAG,
        shortflag="cfg",
        description="Load settings from a JSON or CSV file",
        default=ScalarValue(""),
        hidden=True,
    ),
)

_UNSET: Any = object()


class OptionBuilder:
    """Chainable handle on one option stored in an :class:`OptionRegistry`.

    The builder refers to its option by canonical flag, so it stays valid
    however the registry's storage changes.  Each method sets a property
    when given an argument and returns the builder, or reads the property
    when called without one.
    """

    __slots__ = ("_registry", "_flag")

    def __init__(self, registry: OptionRegistry, flag: str) -> None:
        self._registry = registry
        self._flag = flag

    @property
    def spec(self) -> OptionSpec:
        spec = self._registry.find(self._flag)
        if spec is None:
            raise KeyError(f"option {self._flag!r} is no longer declared")
        return spec

    def flag(self, value: str = _UNSET) -> Any:
        if value is _UNSET:
            return self._flag
        self._registry._rename(self._flag, value)
        self._flag = value
        return self

    def shortflag(self, value: str = _UNSET) -> Any:
        if value is _UNSET:
            return self.spec.shortflag
        self.spec.shortflag = value
        return self

    def description(self, value: str = _UNSET) -> Any:
        if value is _UNSET:
            return self.spec.description
        self.spec.description = value
        return self

    def default_value(self, value: Any = _UNSET) -> Any:
        if value is _UNSET:
            return ScalarValue(self.spec.default)
        spec = self.spec
        new_default = ScalarValue(value)
        if spec.kind is not ValueKind.UNKNOWN and new_default.kind is not spec.kind:
            raise KindChangeError(
                f"option {spec.flag!r} is declared as {spec.kind.value}, "
                f"cannot change its default to {new_default.kind.value}"
            )
        spec.default = new_default
        return self

    def required(self, value: bool = _UNSET) -> Any:
        if value is _UNSET:
            return self.spec.required
        self.spec.required = value
        return self

    def hidden(self, value: bool = _UNSET) -> Any:
        if value is _UNSET:
            return self.spec.hidden
        self.spec.hidden = value
        return self

    def type(self) -> ValueKind:
        return self.spec.kind

    def __repr__(self) -> str:
        return f"OptionBuilder({self._flag!r})"


class OptionRegistry:
    """Mapping from canonical flag to :class:`OptionSpec`.

    Iteration is in ascending flag order, which keeps help output and
    validation diagnostics deterministic.
    """

    def __init__(self, *, inject_hidden: bool = True) -> None:
        self._specs: dict[str, OptionSpec] = {}
        if inject_hidden:
            for spec in HIDDEN_OPTIONS:
                self._specs[spec.flag] = spec.model_copy(
                    update={"default": ScalarValue(spec.default)}
                )

    def declare(self, flag: str) -> OptionBuilder:
        """Insert a fresh option, replacing any previous one with that flag."""
        self._specs[flag] = OptionSpec(flag=flag)
        return OptionBuilder(self, flag)

    def option(self, flag: str) -> OptionBuilder:
        """Return a builder for ``flag``, declaring it first if needed."""
        if flag not in self._specs:
            return self.declare(flag)
        return OptionBuilder(self, flag)

    def remove(self, flag: str) -> bool:
        return self._specs.pop(flag, None) is not None

    def find(self, flag: str) -> OptionSpec | None:
        return self._specs.get(flag)

    def translate_short_flag(self, shortflag: str) -> str:
        """Canonical flag owning ``shortflag``, or ``shortflag`` itself."""
        if not shortflag:
            return shortflag
        for spec in self:
            if spec.shortflag == shortflag:
                return spec.flag
        return shortflag

    def resolve(self, name: str, token_kind: TokenKind) -> OptionSpec | None:
        """Look up a flag token (dashes already removed)."""
        if token_kind is TokenKind.SHORTFLAG:
            name = self.translate_short_flag(name)
        return self.find(name)

    def flags(self) -> list[str]:
        return sorted(self._specs)

    def _rename(self, old: str, new: str) -> None:
        spec = self._specs[old]
        spec.flag = new
        del self._specs[old]
        self._specs[new] = spec

    def __contains__(self, flag: object) -> bool:
        return flag in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[OptionSpec]:
        for flag in sorted(self._specs):
            yield self._specs[flag]
