"""
Error types and element location tracking for hofkit transforms.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class ElementLocation:
    """
    Represents where in a collection a callback failed.

    Attributes:
        operation: Name of the transform that was running (e.g. "map_seq")
        index: 0-indexed position for ordered sequences
        key: Mapping key for map_assoc / filter_assoc
    """

    operation: str
    index: Optional[int] = None
    key: Optional[Hashable] = None

    def __str__(self) -> str:
        if self.index is not None:
            return f"{self.operation}[{self.index}]"
        if self.key is not None:
            return f"{self.operation}[{self.key!r}]"
        return self.operation


class HofkitError(Exception):
    """Base exception for all hofkit errors."""

    def __init__(self, message: str, location: Optional[ElementLocation] = None) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"[{self.location}] {self.message}"
        return self.message


class InvalidArgumentError(HofkitError):
    """
    Raised when a caller-supplied function fails for a given element.

    The transform stops at the offending element; nothing after it is
    processed. The original exception is kept as ``cause`` and is also
    chained as ``__cause__``.
    """

    def __init__(
        self,
        element: Any,
        cause: BaseException,
        location: Optional[ElementLocation] = None,
    ) -> None:
        self.element = element
        self.cause = cause
        message = f"callback failed for element {element!r}: {type(cause).__name__}: {cause}"
        super().__init__(message, location)


class UnwrapError(HofkitError):
    """Raised when unwrap is called on an Err that does not carry an exception."""

    pass
