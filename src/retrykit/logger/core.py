"""
Logger with level filtering and context chaining.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from .strategies import StdlibStrategy
from .types import LogLevel, LogStrategy


@dataclass(frozen=True)
class Logger:
    """
    Level-filtering front end over a LogStrategy.

    Immutable: `with_context` returns a new Logger sharing the same strategy.

    Attributes:
        strategy: Output sink (default: StdlibStrategy)
        min_level: Records below this level are dropped (default: debug)
        context: Optional name prefixed to each record as "[context]"
    """

    strategy: LogStrategy = field(default_factory=StdlibStrategy)
    min_level: LogLevel = LogLevel.DEBUG
    context: str | None = None

    def is_enabled(self, level: LogLevel) -> bool:
        return LogLevel(level).priority >= self.min_level.priority

    def log(self, level: LogLevel, *values: Any) -> None:
        level = LogLevel(level)
        if not self.is_enabled(level):
            return
        if self.context:
            values = (f"[{self.context}]", *values)
        self.strategy.log(level, *values)

    def debug(self, *values: Any) -> None:
        self.log(LogLevel.DEBUG, *values)

    def info(self, *values: Any) -> None:
        self.log(LogLevel.INFO, *values)

    def warn(self, *values: Any) -> None:
        self.log(LogLevel.WARN, *values)

    def error(self, *values: Any) -> None:
        self.log(LogLevel.ERROR, *values)

    def with_context(self, context: str) -> "Logger":
        """Return a Logger with the same strategy and level, tagged with `context`."""
        return replace(self, context=context)


_default_logger: Logger | None = None


def create_logger(
    strategy: LogStrategy | None = None,
    min_level: LogLevel = LogLevel.DEBUG,
    context: str | None = None,
) -> Logger:
    """
    Create a logger.

    Called with no arguments, returns a shared default logger forwarding to the
    "retrykit" stdlib logger.
    """
    global _default_logger

    if strategy is None and min_level == LogLevel.DEBUG and context is None:
        if _default_logger is None:
            _default_logger = Logger()
        return _default_logger

    return Logger(
        strategy=strategy if strategy is not None else StdlibStrategy(),
        min_level=LogLevel(min_level),
        context=context,
    )
