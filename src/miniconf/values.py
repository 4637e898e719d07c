from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping

from .options import OptionRegistry
from .value import ScalarValue


class ResolvedValues(MutableMapping[str, ScalarValue]):
    """Final flag -> value mapping produced by a parse.

    Values are copied on the way in, so no two containers ever share a
    :class:`ScalarValue`.  Iteration is ascending by flag.
    """

    def __init__(self, initial: Mapping[str, ScalarValue] | None = None) -> None:
        self._data: dict[str, ScalarValue] = {}
        if initial:
            self.merge(initial)

    def seed(self, registry: OptionRegistry) -> None:
        """Reset to an independent copy of every option's default."""
        self._data = {spec.flag: ScalarValue(spec.default) for spec in registry}

    def merge(self, other: Mapping[str, ScalarValue]) -> None:
        for flag, value in other.items():
            self[flag] = value

    def purge(self, flags: Iterable[str]) -> None:
        for flag in flags:
            self._data.pop(flag, None)

    def get_copy(self, flag: str) -> ScalarValue:
        return ScalarValue(self._data[flag])

    def __getitem__(self, flag: str) -> ScalarValue:
        return self._data[flag]

    def __setitem__(self, flag: str, value: ScalarValue) -> None:
        self._data[flag] = ScalarValue(value)

    def __delitem__(self, flag: str) -> None:
        del self._data[flag]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self)
        return f"ResolvedValues({{{body}}})"
