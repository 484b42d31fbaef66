"""
Log output strategies.

`StdlibStrategy` is the default and hands records to the standard `logging`
library. `StderrStrategy` and `JsonlStrategy` write directly, for processes
whose stdout is reserved for protocol traffic.
"""

import json
import logging
import sys
from typing import Any, TextIO

from .types import LogLevel
from .utils import iso_timestamp, limit_object_depth

_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

LEVEL_COLORS = {
    LogLevel.DEBUG: "\x1b[36m",  # cyan
    LogLevel.INFO: "\x1b[32m",  # green
    LogLevel.WARN: "\x1b[33m",  # yellow
    LogLevel.ERROR: "\x1b[31m",  # red
}
RESET_COLOR = "\x1b[0m"


class StdlibStrategy:
    """Forward records to a `logging.Logger`."""

    def __init__(self, name: str = "retrykit"):
        self.name = name
        self._logger = logging.getLogger(name)

    def log(self, level: LogLevel, *values: Any) -> None:
        level = LogLevel(level)
        self._logger.log(_STDLIB_LEVELS[level], " ".join(str(v) for v in values))


class StderrStrategy:
    """Write records to stderr with a `[LEVEL]` tag, optionally coloured."""

    def __init__(self, use_colors: bool = True, stream: TextIO | None = None):
        self.use_colors = use_colors
        self._stream = stream

    def _format_level(self, level: LogLevel) -> str:
        tag = f"[{level.value.upper():<5}]"
        if not self.use_colors:
            return tag
        return f"{LEVEL_COLORS[level]}{tag}{RESET_COLOR}"

    def log(self, level: LogLevel, *values: Any) -> None:
        level = LogLevel(level)
        stream = self._stream or sys.stderr
        print(self._format_level(level), *values, file=stream)


class JsonlStrategy:
    """
    Write one JSON object per record.

    Args:
        destination: "stdout", "stderr", or a file path opened in append mode
        include_timestamp: Add an ISO 8601 "timestamp" field
        max_depth: Nesting limit applied to logged values
        max_array_length: Length limit applied to logged sequences
    """

    def __init__(
        self,
        destination: str,
        include_timestamp: bool = True,
        max_depth: int = 10,
        max_array_length: int = 100,
    ):
        self.destination = destination
        self.include_timestamp = include_timestamp
        self.max_depth = max_depth
        self.max_array_length = max_array_length
        self._file: TextIO | None = None
        if destination not in ("stdout", "stderr"):
            self._file = open(destination, "a", encoding="utf-8")

    def _format_entry(self, level: LogLevel, values: tuple[Any, ...]) -> dict[str, Any]:
        processed = [limit_object_depth(v, self.max_depth, self.max_array_length) for v in values]
        entry: dict[str, Any] = {
            "level": level.value,
            "message": processed[0] if len(processed) == 1 else processed,
        }
        if self.include_timestamp:
            entry["timestamp"] = iso_timestamp()
        return entry

    def _output(self) -> TextIO | None:
        if self.destination == "stdout":
            return sys.stdout
        if self.destination == "stderr":
            return sys.stderr
        return self._file

    def log(self, level: LogLevel, *values: Any) -> None:
        level = LogLevel(level)
        output = self._output()
        if output is None:
            return
        output.write(json.dumps(self._format_entry(level, values)) + "\n")
        output.flush()

    def close(self) -> None:
        """Close the destination file, if one was opened."""
        if self._file is not None:
            self._file.close()
            self._file = None
