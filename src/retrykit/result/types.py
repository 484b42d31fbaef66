"""
Result type and error information payloads.

A Result is either a `Success` holding a value or a `Failure` holding an
error. Both variants are frozen dataclasses; the field belonging to the other
variant simply does not exist.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error payload."""

    error: E


Result = Union[Success[T], Failure[E]]


@dataclass(frozen=True)
class ErrorInfo:
    """
    Error payload used with Result-based retry.

    Attributes:
        message: Human-readable description
        recoverable: Whether a repeated attempt could plausibly succeed
        type: Broad error category (e.g. "network", "fetch")
        code: Specific error code within the category
        cause: Underlying exception, if any
        details: Extra category-specific fields
    """

    message: str
    recoverable: bool = False
    type: str = "general"
    code: str = "error"
    cause: BaseException | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.type}:{self.code}] {self.message}"
