"""The :class:`Config` object: declare options, parse, validate, export."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from . import render
from .diagnostics import DiagnosticLog
from .engine import ParseEngine
from .options import HELP_FLAG, OptionBuilder, OptionRegistry
from .serialize import dumps, load_file, sniff_format, write_file
from .types import ExportFormat, LogLevel, ValueKind
from .validate import check_format, should_abort, validate
from .value import ScalarValue
from .values import ResolvedValues

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParseOptions:
    log_level: LogLevel = LogLevel.WARNING
    auto_help: bool = True
    load_config: bool = True
    show_hidden: bool = False


class Config:
    """Declared options plus the values resolved for them.

    Typical use::

        conf = Config("A small tool")
        conf.option("threads").shortflag("t").default_value(4).description("Worker count")
        if not conf.parse(sys.argv):
            conf.print_log()
        threads = conf["threads"].get_int()
    """

    def __init__(
        self,
        description: str = "",
        *,
        options: ParseOptions | None = None,
        console: Console | None = None,
    ) -> None:
        self.description = description
        self.options = options or ParseOptions()
        self.console = console or Console()
        self.registry = OptionRegistry()
        self.values = ResolvedValues()
        self.log = DiagnosticLog()
        self.program = ""

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def option(self, flag: str) -> OptionBuilder:
        return self.registry.option(flag)

    @property
    def log_level(self) -> LogLevel:
        return self.options.log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self.options.log_level = level

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> bool:
        """Resolve option values from defaults, a config file and ``argv``.

        ``argv[0]`` is the program path.  Returns ``False`` when the format
        check or the final validation reports an error and the log level
        allows aborting; the details are in :attr:`log`.
        """
        tokens = list(argv)
        if should_abort(self.check_format(), self.log_level):
            return False

        self.values.seed(self.registry)
        engine = ParseEngine(self.registry, self.values, self.log)
        if self.options.load_config:
            path = engine.find_config_path(tokens)
            if path is not None:
                self.load(path)

        self.program = engine.scan(tokens)

        if self.options.auto_help and self._help_requested():
            self.print_help()

        return not should_abort(self.validate(), self.log_level)

    def _help_requested(self) -> bool:
        value = self.values.get(HELP_FLAG)
        return value is not None and value.kind is ValueKind.BOOL and value.get_boolean()

    def check_format(self) -> LogLevel:
        return check_format(self.registry, self.description, self.log)

    def validate(self) -> LogLevel:
        return validate(self.registry, self.values, self.log)

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def __getitem__(self, flag: str) -> ScalarValue:
        return self.values.get_copy(flag)

    def __contains__(self, flag: object) -> bool:
        return flag in self.values

    def get(self, flag: str, default: ScalarValue | None = None) -> ScalarValue | None:
        if flag not in self.values:
            return default
        return self.values.get_copy(flag)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def load(self, path: str | Path) -> bool:
        """Merge values from a JSON or CSV file over the current ones."""
        loaded, ok = load_file(path, self.registry, self.log)
        self.values.merge(loaded)
        logger.debug("merged %d value(s) from %s", len(loaded), path)
        return ok

    def serialize(
        self,
        path: str | Path | None = None,
        fmt: ExportFormat | None = None,
        *,
        indent: int | None = 4,
    ) -> str:
        """Render the resolved values, writing them to ``path`` if given."""
        if fmt is None:
            fmt = sniff_format(path) if path is not None else ExportFormat.JSON
        text = dumps(self.values, self.registry, fmt, indent=indent)
        if path is not None:
            write_file(path, text)
        return text

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def print_usage(self) -> None:
        render.render_usage(
            self.console, self.program, self.registry, show_hidden=self.options.show_hidden
        )

    def print_help(self) -> None:
        render.render_help(
            self.console,
            self.program,
            self.description,
            self.registry,
            show_hidden=self.options.show_hidden,
        )

    def print_values(self) -> None:
        render.render_values(self.console, self.values, title=self.program)

    def print_log(self, level: LogLevel | None = None) -> None:
        if level is None:
            level = min(self.log_level, LogLevel.ERROR)
        render.render_log(self.console, self.log, level)
