from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "."


def split_flag(flag: str) -> list[str]:
    """Split a dotted canonical flag into its path segments.

    Empty segments are kept so that :func:`join_flag` restores the input.
    """
    return flag.split(SEPARATOR)


def join_flag(segments: list[str] | tuple[str, ...]) -> str:
    """Build a dotted canonical flag from path segments."""
    return SEPARATOR.join(segments)


@dataclass(frozen=True, slots=True)
class OptionPath:
    """Hierarchical name of an option, e.g. ``part2.subpart1.value1``."""

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, flag: str) -> OptionPath:
        return cls(tuple(split_flag(flag)))

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def parent(self) -> OptionPath:
        return OptionPath(self.segments[:-1])

    def prefixes(self) -> list[OptionPath]:
        """Proper prefixes, shortest first."""
        return [OptionPath(self.segments[:i]) for i in range(1, len(self.segments))]

    def is_prefix_of(self, other: OptionPath) -> bool:
        n = len(self.segments)
        return n < len(other.segments) and other.segments[:n] == self.segments

    def child(self, segment: str) -> OptionPath:
        return OptionPath(self.segments + (segment,))

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return join_flag(self.segments)
