"""Result codes and exception classes for Marcador.

Every failure the engine can produce belongs to a closed set of kinds.
Internally each kind is raised as a ``MarcadorError`` subclass; the
``marcador.api`` facade turns them back into returned ``Result`` values.
Ambiguous Markdown is never an error: it renders literally.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class Result(IntEnum):
    """Outcome of a Marcador operation."""

    OK = 0
    NULL_ARGUMENT = -1
    INVALID_SIZE = -2
    BUFFER_TOO_SMALL = -3
    IO_FAILED = -4
    MEMORY_ALLOCATION = -5
    INVALID_INPUT = -6
    PARSE_FAILED = -7

    @property
    def ok(self) -> bool:
        return self is Result.OK

    @property
    def message(self) -> str:
        """Human-readable description of the result."""
        return _MESSAGES[self]


_MESSAGES: dict[Result, str] = {
    Result.OK: "Success",
    Result.NULL_ARGUMENT: "Null pointer argument",
    Result.INVALID_SIZE: "Invalid size argument",
    Result.BUFFER_TOO_SMALL: "Output buffer too small",
    Result.IO_FAILED: "I/O operation failed",
    Result.MEMORY_ALLOCATION: "Memory allocation failed",
    Result.INVALID_INPUT: "Invalid input",
    Result.PARSE_FAILED: "Parse failed",
}


class MarcadorError(Exception):
    """Base exception for all Marcador errors.

    Each subclass maps to exactly one ``Result`` code.
    """

    result: ClassVar[Result] = Result.PARSE_FAILED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.result.message)


class NullArgumentError(MarcadorError):
    """A required argument was missing (``None``)."""

    result = Result.NULL_ARGUMENT


class InvalidSizeError(MarcadorError):
    """A size or capacity argument was out of range."""

    result = Result.INVALID_SIZE


class BufferTooSmallError(MarcadorError):
    """Output did not fit in a fixed-size destination."""

    result = Result.BUFFER_TOO_SMALL

    def __init__(self, needed: int | None = None, available: int | None = None) -> None:
        self.needed = needed
        self.available = available
        if needed is None or available is None:
            super().__init__()
        else:
            super().__init__(f"Output buffer too small: need {needed}, have {available}")


class IOFailedError(MarcadorError):
    """Reading or writing a file failed."""

    result = Result.IO_FAILED

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"I/O operation failed for '{path}'{detail}")


class AllocationError(MarcadorError):
    """Growing an internal buffer failed."""

    result = Result.MEMORY_ALLOCATION


class InvalidInputError(MarcadorError):
    """A construct parser was invoked on text it does not match."""

    result = Result.INVALID_INPUT


class ParseError(MarcadorError):
    """Error during Markdown parsing.

    Reserved: the engine falls back to literal output instead of raising it.
    """

    result = Result.PARSE_FAILED

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


_ERRORS: dict[Result, type[MarcadorError]] = {
    Result.NULL_ARGUMENT: NullArgumentError,
    Result.INVALID_SIZE: InvalidSizeError,
    Result.MEMORY_ALLOCATION: AllocationError,
    Result.INVALID_INPUT: InvalidInputError,
}


def raise_for_result(result: Result, message: str | None = None) -> None:
    """Raise the exception matching a non-OK result.

    Args:
        result: Result returned by a facade function
        message: Optional message overriding the default text

    Raises:
        MarcadorError: The subclass bound to ``result`` (no-op for OK)
    """
    if result is Result.OK:
        return
    if result is Result.BUFFER_TOO_SMALL:
        error: MarcadorError = BufferTooSmallError()
    elif result is Result.IO_FAILED:
        error = IOFailedError("<unknown>", message)
    elif result is Result.PARSE_FAILED:
        error = ParseError(message or result.message)
    else:
        error = _ERRORS[result](message)
    raise error


__all__ = [
    "AllocationError",
    "BufferTooSmallError",
    "IOFailedError",
    "InvalidInputError",
    "InvalidSizeError",
    "MarcadorError",
    "NullArgumentError",
    "ParseError",
    "Result",
    "raise_for_result",
]
