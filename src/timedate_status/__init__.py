"""Report the system time/date daemon status as JSON."""

__version__ = "1.0.0"

from timedate_status.cli import main
from timedate_status.collector import build_status, collect_status, parse_show_output
from timedate_status.errors import (
    ExecutionError,
    InvalidTimezoneError,
    SerializationError,
    TimedateStatusError,
    TimestampParseError,
)
from timedate_status.models import TimeStatus

__all__ = [
    "collect_status",
    "build_status",
    "parse_show_output",
    "TimeStatus",
    "TimedateStatusError",
    "ExecutionError",
    "InvalidTimezoneError",
    "TimestampParseError",
    "SerializationError",
    "main",
    "__version__",
]
