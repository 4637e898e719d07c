from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("miniconf")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .coerce import parse_value
from .config import Config, ParseOptions
from .diagnostics import DiagnosticLog
from .engine import EngineState, ParseEngine
from .errors import KindChangeError, MiniconfError, TypeMismatchError
from .option_path import OptionPath
from .options import HIDDEN_OPTIONS, OptionBuilder, OptionRegistry, OptionSpec
from .tokenizer import classify
from .types import DiagnosticCode, ExportFormat, LogEntry, LogLevel, TokenKind, ValueKind
from .validate import check_format, validate
from .value import ScalarValue
from .values import ResolvedValues

__all__ = [
    "Config",
    "DiagnosticCode",
    "DiagnosticLog",
    "EngineState",
    "ExportFormat",
    "HIDDEN_OPTIONS",
    "KindChangeError",
    "LogEntry",
    "LogLevel",
    "MiniconfError",
    "OptionBuilder",
    "OptionPath",
    "OptionRegistry",
    "OptionSpec",
    "ParseEngine",
    "ParseOptions",
    "ResolvedValues",
    "ScalarValue",
    "TokenKind",
    "TypeMismatchError",
    "ValueKind",
    "check_format",
    "classify",
    "parse_value",
    "validate",
]
