from __future__ import annotations

from .coerce import is_float_literal
from .types import TokenKind


def classify(token: str) -> TokenKind:
    """Classify a raw command-line token.

    A token that starts with ``-`` but reads entirely as a number is a
    value, so negative arguments such as ``-3.14`` are not taken for short
    flags.  The numeric check must therefore run before the dash checks.
    """
    if not token:
        return TokenKind.UNKNOWN
    if token.startswith("-") and is_float_literal(token):
        return TokenKind.VALUE
    if token.startswith("--"):
        return TokenKind.FLAG
    if token.startswith("-"):
        return TokenKind.SHORTFLAG
    return TokenKind.VALUE


def strip_flag(token: str) -> str:
    """Flag text without its leading ``--`` or ``-``."""
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token
