from __future__ import annotations

import logging
from collections.abc import Iterator

from .types import DiagnosticCode, LogEntry, LogLevel

logger = logging.getLogger(__name__)


class DiagnosticLog:
    """Ordered, append-only record of everything checking and parsing reported."""

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def add(self, severity: LogLevel, flag: str, message: str, code: DiagnosticCode) -> LogEntry:
        entry = LogEntry(severity=severity, flag=flag, message=message, code=code)
        self._entries.append(entry)
        logger.debug("[%s] %s: %s", severity.name, flag, message)
        return entry

    def info(self, flag: str, message: str, code: DiagnosticCode) -> LogEntry:
        return self.add(LogLevel.INFO, flag, message, code)

    def warning(self, flag: str, message: str, code: DiagnosticCode) -> LogEntry:
        return self.add(LogLevel.WARNING, flag, message, code)

    def error(self, flag: str, message: str, code: DiagnosticCode) -> LogEntry:
        return self.add(LogLevel.ERROR, flag, message, code)

    def worst(self, since: int = 0) -> LogLevel:
        """Highest severity among entries from index ``since`` on (INFO if none)."""
        return max((e.severity for e in self._entries[since:]), default=LogLevel.INFO)

    def filter(self, level: LogLevel) -> list[LogEntry]:
        return [e for e in self._entries if e.severity >= level]

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]
