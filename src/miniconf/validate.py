"""Consistency checks run before and after a parse.

Both checks append to the diagnostic log and return the worst severity they
produced; the caller decides whether that aborts the parse.
"""

from __future__ import annotations

from collections import defaultdict

from .diagnostics import DiagnosticLog
from .options import OptionRegistry
from .types import DiagnosticCode, LogLevel
from .values import ResolvedValues


def check_format(registry: OptionRegistry, description: str, log: DiagnosticLog) -> LogLevel:
    """Check the declared options themselves, before any token is read."""
    start = len(log)
    owners: dict[str, list[str]] = defaultdict(list)
    for spec in registry:
        if spec.shortflag:
            owners[spec.shortflag].append(spec.flag)

    for spec in registry:
        if not spec.required and spec.default.is_empty():
            log.error(spec.flag, "optional option has no default value", DiagnosticCode.FORMAT)
        if spec.shortflag and len(owners[spec.shortflag]) > 1:
            others = ", ".join(f for f in owners[spec.shortflag] if f != spec.flag)
            log.error(
                spec.flag,
                f"short flag -{spec.shortflag} is also used by {others}",
                DiagnosticCode.FORMAT,
            )
        if not spec.description:
            log.warning(spec.flag, "no description", DiagnosticCode.FORMAT)
        if not spec.shortflag:
            log.warning(spec.flag, "no short flag", DiagnosticCode.FORMAT)

    if not description:
        log.warning("", "no program description", DiagnosticCode.FORMAT)
    return log.worst(start)


def validate(registry: OptionRegistry, values: ResolvedValues, log: DiagnosticLog) -> LogLevel:
    """Check the resolved values once every source has been applied.

    Hidden options are dropped from ``values`` first.
    """
    start = len(log)
    values.purge(spec.flag for spec in registry if spec.hidden)

    for flag, value in values.items():
        if value.is_empty():
            code = DiagnosticCode.UNDEFINED_OPTION if flag in registry else DiagnosticCode.VALUE
            log.error(flag, "no value", code)

    for spec in registry:
        if not spec.hidden and spec.flag not in values:
            log.error(spec.flag, "option is undefined", DiagnosticCode.UNDEFINED_OPTION)
    return log.worst(start)


def should_abort(severity: LogLevel, log_level: LogLevel) -> bool:
    """Errors abort unless the configured level is above ERROR (i.e. NONE)."""
    return severity >= LogLevel.ERROR and log_level <= LogLevel.ERROR
