"""
Logger types: levels and the strategy protocol.
"""

from enum import Enum
from typing import Any, Protocol


class LogLevel(str, Enum):
    """Log levels, lowest to highest priority."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def priority(self) -> int:
        return LOG_LEVEL_PRIORITY[self]


LOG_LEVEL_PRIORITY: dict[LogLevel, int] = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}


class LogStrategy(Protocol):
    """Output sink for log records."""

    def log(self, level: LogLevel, *values: Any) -> None: ...
