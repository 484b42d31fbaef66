"""
retrykit - Logger.

Pluggable logging with a `log(level, *values)` sink shape.
"""

from .types import LogLevel, LogStrategy, LOG_LEVEL_PRIORITY
from .strategies import StdlibStrategy, StderrStrategy, JsonlStrategy
from .core import Logger, create_logger
from .utils import iso_timestamp, limit_object_depth

__all__ = [
    "LogLevel",
    "LogStrategy",
    "LOG_LEVEL_PRIORITY",
    "StdlibStrategy",
    "StderrStrategy",
    "JsonlStrategy",
    "Logger",
    "create_logger",
    "iso_timestamp",
    "limit_object_depth",
]
