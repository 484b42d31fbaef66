"""
Formatting helpers for log strategies.
"""

from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from typing import Any, Mapping


def iso_timestamp() -> str:
    """Current UTC time in ISO 8601 format with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def limit_object_depth(
    obj: Any,
    max_depth: int = 10,
    max_array_length: int = 100,
    _depth: int = 0,
) -> Any:
    """
    Copy a value into JSON-friendly form with bounded nesting.

    Containers nested at `max_depth` are replaced by a marker string
    ("[Array(n)]" or "[Object TypeName]"); sequences longer than
    `max_array_length` are truncated with a "[...n more items]" tail.
    Anything else that JSON cannot represent is rendered with str().
    """
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)

    if isinstance(obj, (list, tuple, set, frozenset)):
        items = list(obj)
        if _depth >= max_depth:
            return f"[Array({len(items)})]"
        copied = [limit_object_depth(item, max_depth, max_array_length, _depth + 1) for item in items[:max_array_length]]
        if len(items) > max_array_length:
            copied.append(f"[...{len(items) - max_array_length} more items]")
        return copied

    if isinstance(obj, Mapping):
        if _depth >= max_depth:
            return f"[Object {type(obj).__name__}]"
        return {
            str(key): limit_object_depth(value, max_depth, max_array_length, _depth + 1)
            for key, value in obj.items()
        }

    if isinstance(obj, BaseException):
        return f"{type(obj).__name__}: {obj}"

    return str(obj)
