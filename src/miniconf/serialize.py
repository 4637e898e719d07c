from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, JsonValue, TypeAdapter, ValidationError

from .diagnostics import DiagnosticLog
from .merge import csv_lines_to_values, tree_to_values, values_to_csv_lines, values_to_tree
from .options import OptionRegistry
from .types import DiagnosticCode, ExportFormat
from .value import ScalarValue

logger = logging.getLogger(__name__)

# A config document is a JSON object at the top level.  Non-finite floats are
# written as Infinity/NaN so they read back as floats.
_TREE_ADAPTER: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(
    dict[str, JsonValue], config=ConfigDict(ser_json_inf_nan="constants")
)


def sniff_format(path: str | Path) -> ExportFormat:
    """Pick the file format from the extension, JSON unless it says CSV."""
    suffix = Path(path).suffix
    if suffix in (".csv", ".CSV"):
        return ExportFormat.CSV
    return ExportFormat.JSON


def dump_tree(tree: Mapping[str, Any], *, indent: int | None = 4) -> str:
    return _TREE_ADAPTER.dump_json(dict(tree), indent=indent).decode("utf-8")


def dumps(
    values: Mapping[str, ScalarValue],
    registry: OptionRegistry,
    fmt: ExportFormat = ExportFormat.JSON,
    *,
    indent: int | None = 4,
) -> str:
    """Render resolved values as JSON (nested) or CSV (flat) text."""
    if fmt is ExportFormat.CSV:
        lines = values_to_csv_lines(values, registry)
        return "".join(f"{line}\n" for line in lines)
    return dump_tree(values_to_tree(values, registry), indent=indent)


def loads(
    text: str, fmt: ExportFormat, registry: OptionRegistry, log: DiagnosticLog, *, source: str = ""
) -> tuple[dict[str, ScalarValue], bool]:
    """Read values from config text.

    Returns the values that could be read and whether the whole document
    was read cleanly.
    """
    if fmt is ExportFormat.CSV:
        return csv_lines_to_values(text.splitlines(), registry, log)
    try:
        tree = _TREE_ADAPTER.validate_json(text)
    except ValidationError as exc:
        log.error(
            source,
            f"not a JSON object: {exc.errors()[0]['msg']}",
            DiagnosticCode.CONFIG_FILE,
        )
        return {}, False
    return tree_to_values(tree, registry, log)


def load_file(
    path: str | Path, registry: OptionRegistry, log: DiagnosticLog
) -> tuple[dict[str, ScalarValue], bool]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.error(str(path), f"cannot read file: {exc}", DiagnosticCode.CONFIG_FILE)
        return {}, False
    logger.debug("loading %s", path)
    return loads(text, sniff_format(path), registry, log, source=str(path))


def write_file(path: str | Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
