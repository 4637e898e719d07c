"""Exceptions raised for programming errors.

Problems in user input (command-line tokens, config files) are never raised;
they are recorded as :class:`~miniconf.types.LogEntry` diagnostics instead.
"""

from __future__ import annotations


class MiniconfError(Exception):
    """Base exception for all miniconf errors."""


class TypeMismatchError(MiniconfError, TypeError):
    """Raised when a value is read through an accessor of another kind."""


class KindChangeError(MiniconfError, TypeError):
    """Raised when an option's default would change its declared kind."""
