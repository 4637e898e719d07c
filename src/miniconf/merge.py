"""Conversion between the flat dotted-flag namespace and file layouts.

Nested (JSON) layout::

    {"part1": {"value1": "p1v1", "value3": 1.3}, "strOpt": "string"}

Flat (CSV) layout::

    part1.value1,p1v1
    part1.value3,1.300000
    strOpt,string
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .coerce import coerce_node, infer_value, parse_value
from .diagnostics import DiagnosticLog
from .option_path import OptionPath, join_flag
from .options import OptionRegistry
from .types import DiagnosticCode, ValueKind
from .value import ScalarValue


def exported_items(
    values: Mapping[str, ScalarValue], registry: OptionRegistry
) -> list[tuple[str, ScalarValue]]:
    """Entries that belong in an export: everything but hidden options."""
    items = []
    for flag in sorted(values):
        spec = registry.find(flag)
        if spec is not None and spec.hidden:
            continue
        items.append((flag, values[flag]))
    return items


def _strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


# ---------------------------------------------------------------------------
# Nested layout
# ---------------------------------------------------------------------------


def values_to_tree(
    values: Mapping[str, ScalarValue], registry: OptionRegistry
) -> dict[str, Any]:
    """Nest resolved values by their dotted path segments.

    When a prefix of a flag is itself a flag (``a`` and ``a.b``), the prefix
    stays a leaf and the rest of the longer flag is written as a literal
    dotted key next to it, so flattening gives back the same flags.
    """
    items = exported_items(values, registry)
    flags = {flag for flag, _ in items}
    tree: dict[str, Any] = {}
    for flag, value in items:
        path = OptionPath.parse(flag)
        depth = 0
        for prefix in path.prefixes():
            if str(prefix) in flags:
                break
            depth = len(prefix)
        node = tree
        for segment in path.segments[:depth]:
            node = node.setdefault(segment, {})
        node[join_flag(path.segments[depth:])] = value.to_python()
    return tree


def tree_to_values(
    tree: Mapping[str, Any], registry: OptionRegistry, log: DiagnosticLog
) -> tuple[dict[str, ScalarValue], bool]:
    """Flatten a parsed tree back into dotted flags.

    Returns the values that could be read and whether every leaf was
    readable.  An unreadable leaf is logged and skipped; its siblings are
    still read.
    """
    out: dict[str, ScalarValue] = {}
    ok = _flatten(tree, OptionPath(()), registry, log, out)
    return out, ok


def _flatten(
    node: Mapping[str, Any],
    path: OptionPath,
    registry: OptionRegistry,
    log: DiagnosticLog,
    out: dict[str, ScalarValue],
) -> bool:
    ok = True
    for key, child in node.items():
        child_path = path.child(key)
        if isinstance(child, Mapping):
            ok = _flatten(child, child_path, registry, log, out) and ok
            continue
        flag = str(child_path)
        spec = registry.find(flag)
        kind = spec.kind if spec is not None else ValueKind.UNKNOWN
        value = coerce_node(child, kind)
        if value is None:
            log.warning(
                flag, f"cannot read {child!r} as {kind.value}", DiagnosticCode.CONFIG_FILE
            )
            ok = False
            continue
        out[flag] = value
    return ok


# ---------------------------------------------------------------------------
# Flat layout
# ---------------------------------------------------------------------------


def values_to_csv_lines(
    values: Mapping[str, ScalarValue], registry: OptionRegistry
) -> list[str]:
    return [
        f"{flag},{_strip_quotes(value.print())}" for flag, value in exported_items(values, registry)
    ]


def csv_lines_to_values(
    lines: Iterable[str], registry: OptionRegistry, log: DiagnosticLog
) -> tuple[dict[str, ScalarValue], bool]:
    out: dict[str, ScalarValue] = {}
    ok = True
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        flag, sep, text = line.partition(",")
        if not sep or not flag:
            log.warning(
                f"line {lineno}", f"expected 'flag,value', got {line!r}", DiagnosticCode.CONFIG_FILE
            )
            ok = False
            continue
        text = _strip_quotes(text)
        spec = registry.find(flag)
        if spec is None or spec.kind is ValueKind.UNKNOWN:
            value = infer_value(text)
        else:
            value = parse_value(text, spec.kind)
        if value.is_empty():
            log.warning(
                flag, f"cannot read {text!r} as {spec.kind.value}", DiagnosticCode.CONFIG_FILE
            )
            ok = False
            continue
        out[flag] = value
    return out, ok
