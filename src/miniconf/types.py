from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class ValueKind(str, Enum):
    UNKNOWN = "unknown"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"


class TokenKind(str, Enum):
    UNKNOWN = "unknown"
    FLAG = "flag"
    SHORTFLAG = "shortflag"
    VALUE = "value"


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


class LogLevel(IntEnum):
    """Severity of a diagnostic, also used as the configured minimum level.

    ``NONE`` never appears on an entry; as a configured level it disables
    aborting on errors.
    """

    INFO = 0
    WARNING = 1
    ERROR = 2
    NONE = 3


class DiagnosticCode(str, Enum):
    FORMAT = "format"
    VALUE = "value"
    UNDEFINED_OPTION = "undefined_option"
    UNRECOGNIZED_FLAG = "unrecognized_flag"
    UNASSOCIATED_VALUE = "unassociated_value"
    ILLEGAL_TOKEN = "illegal_token"
    CONFIG_FILE = "config_file"
    PARSED = "parsed"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A single diagnostic produced while checking or parsing."""

    severity: LogLevel
    flag: str
    message: str
    code: DiagnosticCode
