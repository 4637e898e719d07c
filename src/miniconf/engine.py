"""Token-by-token command-line scan.

The engine is a two-state machine.  In ``IDLE`` no flag is pending; a flag
token resolves to an option and moves it to ``FLAG_SEEN``; the next value
token is coerced to that option's declared kind and written to the resolved
values.  Problems are logged and the scan carries on.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum

from .coerce import parse_value
from .diagnostics import DiagnosticLog
from .options import CONFIG_FLAG, OptionRegistry, OptionSpec
from .tokenizer import classify, strip_flag
from .types import DiagnosticCode, TokenKind, ValueKind
from .value import ScalarValue
from .values import ResolvedValues

_FLAG_TOKENS = (TokenKind.FLAG, TokenKind.SHORTFLAG)


class EngineState(str, Enum):
    IDLE = "idle"
    FLAG_SEEN = "flag_seen"


def program_name(tokens: Sequence[str]) -> str:
    """Basename of the executable path in ``tokens[0]``."""
    if not tokens:
        return ""
    return os.path.basename(tokens[0])


class ParseEngine:
    def __init__(
        self, registry: OptionRegistry, values: ResolvedValues, log: DiagnosticLog
    ) -> None:
        self.registry = registry
        self.values = values
        self.log = log
        self.current: OptionSpec | None = None

    @property
    def state(self) -> EngineState:
        return EngineState.IDLE if self.current is None else EngineState.FLAG_SEEN

    def find_config_path(self, tokens: Sequence[str]) -> str | None:
        """Value following the first config flag, without consuming any state."""
        for token, following in zip(tokens[1:], tokens[2:]):
            kind = classify(token)
            if kind not in _FLAG_TOKENS:
                continue
            spec = self.registry.resolve(strip_flag(token), kind)
            if spec is None or spec.flag != CONFIG_FLAG:
                continue
            if classify(following) is TokenKind.VALUE:
                return following
        return None

    def scan(self, tokens: Sequence[str]) -> str:
        """Consume ``tokens`` (the first one is the program path)."""
        self.current = None
        for token in tokens[1:]:
            self.feed(token)
        return program_name(tokens)

    def feed(self, token: str) -> None:
        kind = classify(token)
        if kind is TokenKind.UNKNOWN:
            # The pending flag, if any, is left as it is.
            self.log.error(token, "illegal token", DiagnosticCode.ILLEGAL_TOKEN)
        elif kind in _FLAG_TOKENS:
            self._on_flag(token, kind)
        else:
            self._on_value(token)

    def _on_flag(self, token: str, kind: TokenKind) -> None:
        name = strip_flag(token)
        spec = self.registry.resolve(name, kind)
        if spec is None:
            self.log.warning(token, "unrecognized flag", DiagnosticCode.UNRECOGNIZED_FLAG)
            if kind is TokenKind.FLAG and name:
                spec = OptionSpec(flag=name, default=ScalarValue(""))
            else:
                self.current = None
                return
        elif spec.kind is ValueKind.BOOL:
            self.values[spec.flag] = ScalarValue(True)
        self.current = spec

    def _on_value(self, token: str) -> None:
        spec = self.current
        if spec is None:
            self.log.warning(token, "unassociated argument", DiagnosticCode.UNASSOCIATED_VALUE)
            return
        value = parse_value(token, spec.kind)
        if value.is_empty():
            self.log.warning(
                spec.flag,
                f"cannot read {token!r} as {spec.kind.value}",
                DiagnosticCode.VALUE,
            )
            return
        self.values[spec.flag] = value
        self.log.info(spec.flag, f"set to {value.print()}", DiagnosticCode.PARSED)
        self.current = None
