"""
Validation errors raised or returned by fragment extraction.

Every failure carries an ``ErrorKind`` so callers holding a ``Failure`` can
branch on the kind of problem without matching on exception types. The same
objects are raised directly by the exception-style entry points.
"""

import enum
from typing import TypeVar

from returns.result import Failure, Result, Success


class ErrorKind(str, enum.Enum):
    """Distinguishes the two families of extraction failures."""

    INVALID_INPUT = "invalid_input"
    MALFORMED_MARKERS = "malformed_markers"


class FragmentError(ValueError):
    """Base class for all extraction failures."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        identifier: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.identifier = identifier
        self.line_number = line_number
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = self.file_path or "<no path>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{location}: {self.message}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FragmentError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.file_path == other.file_path
            and self.identifier == other.identifier
            and self.line_number == other.line_number
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.file_path, self.identifier, self.line_number))


class InvalidInputError(FragmentError):
    """The file path is missing or empty."""

    kind = ErrorKind.INVALID_INPUT


class MalformedMarkersError(FragmentError):
    """The marker structure of a file is not well formed."""

    kind = ErrorKind.MALFORMED_MARKERS


T = TypeVar("T")


def raise_for_failure(result: Result[T, FragmentError]) -> T:
    """Return the value of a successful result, or raise the carried error."""
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise error
    raise TypeError(f"Expected a Result, got {type(result).__name__}")


__all__ = [
    "ErrorKind",
    "FragmentError",
    "InvalidInputError",
    "MalformedMarkersError",
    "raise_for_failure",
]
