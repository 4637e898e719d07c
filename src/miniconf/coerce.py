"""Coercion of command-line tokens and config-file leaves to scalar values."""

from __future__ import annotations

import re
from typing import Any

from .types import ValueKind
from .value import ScalarValue

# Strict scans: the whole token must match, ASCII digits only, no surrounding whitespace.
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)

_FALSE_TOKENS = frozenset({"false", "f"})


def is_int_literal(text: str) -> bool:
    return _INT_RE.fullmatch(text) is not None


def is_float_literal(text: str) -> bool:
    return _FLOAT_RE.fullmatch(text) is not None


def parse_bool(text: str) -> bool:
    # Permissive on purpose: anything that does not spell false is true.
    return text.lower() not in _FALSE_TOKENS


def parse_value(token: str, kind: ValueKind) -> ScalarValue:
    """Coerce a raw token to ``kind``; an Unknown value signals failure."""
    if kind is ValueKind.INT:
        if is_int_literal(token):
            return ScalarValue(int(token))
        return ScalarValue.unknown()
    if kind is ValueKind.FLOAT:
        if is_float_literal(token):
            return ScalarValue(float(token))
        return ScalarValue.unknown()
    if kind is ValueKind.BOOL:
        return ScalarValue(parse_bool(token))
    if kind is ValueKind.STRING:
        return ScalarValue(token)
    return ScalarValue.unknown()


def infer_value(text: str) -> ScalarValue:
    """Type an undeclared flat-file leaf from its literal form."""
    if is_float_literal(text):
        return ScalarValue(float(text))
    lowered = text.lower()
    if lowered in ("true", "false"):
        return ScalarValue(lowered == "true")
    return ScalarValue(text)


def coerce_node(node: Any, kind: ValueKind) -> ScalarValue | None:
    """Type a parsed JSON leaf against a declared kind.

    ``kind`` is ``ValueKind.UNKNOWN`` for undeclared keys, in which case the
    type is taken from the node itself.  Returns ``None`` for nodes that
    cannot become a scalar of the requested kind (null, arrays, mismatches).
    """
    if isinstance(node, bool):
        if kind in (ValueKind.BOOL, ValueKind.UNKNOWN):
            return ScalarValue(node)
        return None
    if isinstance(node, (int, float)):
        if kind is ValueKind.INT:
            if isinstance(node, float) and not node.is_integer():
                return None
            return ScalarValue(int(node))
        if kind in (ValueKind.FLOAT, ValueKind.UNKNOWN):
            return ScalarValue(float(node))
        return None
    if isinstance(node, str):
        if kind in (ValueKind.STRING, ValueKind.UNKNOWN):
            return ScalarValue(node)
        return None
    return None
