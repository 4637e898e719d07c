"""Dynamically typed scalar container.

A :class:`ScalarValue` holds exactly one of an int, a float, a bool or a
string, or nothing at all (the Unknown kind).  Accessors are checked: reading
an int out of a string value raises :class:`TypeMismatchError` rather than
returning garbage.
"""

from __future__ import annotations

from typing import Any

from .errors import TypeMismatchError
from .types import ValueKind

Scalar = int | float | bool | str


class ScalarValue:
    __slots__ = ("_kind", "_payload")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        self._kind = ValueKind.UNKNOWN
        self._payload: Scalar | None = None
        self.assign(value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def unknown(cls) -> ScalarValue:
        return cls()

    @classmethod
    def of_int(cls, value: int) -> ScalarValue:
        return cls(int(value))

    @classmethod
    def of_float(cls, value: float) -> ScalarValue:
        return cls(float(value))

    @classmethod
    def of_bool(cls, value: bool) -> ScalarValue:
        return cls(bool(value))

    @classmethod
    def of_string(cls, value: str) -> ScalarValue:
        return cls(str(value))

    @classmethod
    def of_chars(cls, value: bytes) -> ScalarValue:
        return cls(bytes(value))

    def assign(self, value: Any) -> ScalarValue:
        """Replace kind and payload with a copy of ``value``."""
        # bool is a subclass of int, so it has to be tested first.
        if value is None:
            kind, payload = ValueKind.UNKNOWN, None
        elif isinstance(value, ScalarValue):
            kind, payload = value._kind, value._payload
        elif isinstance(value, bool):
            kind, payload = ValueKind.BOOL, value
        elif isinstance(value, int):
            kind, payload = ValueKind.INT, int(value)
        elif isinstance(value, float):
            kind, payload = ValueKind.FLOAT, float(value)
        elif isinstance(value, str):
            kind, payload = ValueKind.STRING, str(value)
        elif isinstance(value, (bytes, bytearray)):
            kind, payload = ValueKind.STRING, bytes(value).decode("utf-8")
        else:
            raise TypeError(f"cannot store {type(value).__name__} in a ScalarValue")
        self._kind = kind
        self._payload = payload
        return self

    def take(self) -> ScalarValue:
        """Move the content into a new value and leave this one Unknown."""
        moved = ScalarValue(self)
        self._kind = ValueKind.UNKNOWN
        self._payload = None
        return moved

    def __copy__(self) -> ScalarValue:
        return ScalarValue(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> ScalarValue:
        return ScalarValue(self)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def kind(self) -> ValueKind:
        return self._kind

    def _expect(self, kind: ValueKind) -> Any:
        if self._kind is not kind:
            raise TypeMismatchError(
                f"cannot read {kind.value} from a value of kind {self._kind.value}"
            )
        return self._payload

    def get_int(self) -> int:
        return self._expect(ValueKind.INT)

    def get_number(self) -> float:
        return self._expect(ValueKind.FLOAT)

    def get_boolean(self) -> bool:
        return self._expect(ValueKind.BOOL)

    def get_string(self) -> str:
        return self._expect(ValueKind.STRING)

    def get_chars(self) -> bytes:
        return self._expect(ValueKind.STRING).encode("utf-8")

    def is_empty(self) -> bool:
        return self._kind is ValueKind.UNKNOWN or self._payload is None

    def to_python(self) -> Scalar | None:
        return self._payload

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def print(self) -> str:
        """Canonical text rendering of the value."""
        if self.is_empty():
            return "null"
        if self._kind is ValueKind.INT:
            return str(self._payload)
        if self._kind is ValueKind.FLOAT:
            return f"{self._payload:f}"
        if self._kind is ValueKind.BOOL:
            return "true" if self._payload else "false"
        return f'"{self._payload}"'

    def print_kind(self) -> str:
        return self._kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarValue):
            return NotImplemented
        return self._kind is other._kind and self._payload == other._payload

    def __repr__(self) -> str:
        if self.is_empty():
            return "ScalarValue.unknown()"
        return f"ScalarValue({self._payload!r})"
