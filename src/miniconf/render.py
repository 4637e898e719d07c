"""Terminal rendering of help text, resolved values and diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .options import OptionRegistry, OptionSpec
from .types import LogEntry, LogLevel, ValueKind
from .value import ScalarValue

_SEVERITY_STYLES = {
    LogLevel.INFO: "dim",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}


def _visible(registry: OptionRegistry, show_hidden: bool) -> list[OptionSpec]:
    return [spec for spec in registry if show_hidden or not spec.hidden]


def render_usage(
    console: Console, program: str, registry: OptionRegistry, *, show_hidden: bool = False
) -> None:
    parts = [program or "program"]
    for spec in _visible(registry, show_hidden):
        shown = f"-{spec.shortflag}" if spec.shortflag else f"--{spec.flag}"
        arg = shown if spec.kind is ValueKind.BOOL else f"{shown} <{spec.kind.value}>"
        parts.append(arg if spec.required else f"[{arg}]")
    console.print("Usage: " + escape(" ".join(parts)), highlight=False)


def render_help(
    console: Console,
    program: str,
    description: str,
    registry: OptionRegistry,
    *,
    show_hidden: bool = False,
) -> None:
    render_usage(console, program, registry, show_hidden=show_hidden)
    if description:
        console.print(escape(description), highlight=False)

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Flag")
    table.add_column("Short")
    table.add_column("Type")
    table.add_column("Default")
    table.add_column("Required", justify="center")
    table.add_column("Description")
    for spec in _visible(registry, show_hidden):
        table.add_row(
            escape(f"--{spec.flag}"),
            escape(f"-{spec.shortflag}") if spec.shortflag else "",
            spec.kind.value,
            escape(spec.default.print()),
            "yes" if spec.required else "",
            escape(spec.description),
        )
    console.print(table)


def render_values(console: Console, values: Mapping[str, ScalarValue], *, title: str = "") -> None:
    table = Table(title=title or None, show_header=True, header_style="bold")
    table.add_column("Flag")
    table.add_column("Type")
    table.add_column("Value")
    for flag in sorted(values):
        value = values[flag]
        table.add_row(escape(flag), value.print_kind(), escape(value.print()))
    console.print(table)


def render_log(
    console: Console, entries: Iterable[LogEntry], level: LogLevel = LogLevel.INFO
) -> None:
    for entry in entries:
        if entry.severity < level:
            continue
        style = _SEVERITY_STYLES.get(entry.severity, "")
        label = f"[{style}]{entry.severity.name:<7}[/{style}]" if style else entry.severity.name
        where = f"{escape(entry.flag)}: " if entry.flag else ""
        console.print(f"{label} {where}{escape(entry.message)}", highlight=False)
