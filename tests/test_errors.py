"""Tests for result codes and the exception hierarchy."""

import pytest

from marcador.errors import (
    AllocationError,
    BufferTooSmallError,
    InvalidInputError,
    InvalidSizeError,
    IOFailedError,
    MarcadorError,
    NullArgumentError,
    ParseError,
    Result,
    raise_for_result,
)


class TestResult:
    """Result codes and messages."""

    def test_values(self) -> None:
        assert Result.OK == 0
        assert Result.NULL_ARGUMENT == -1
        assert Result.INVALID_SIZE == -2
        assert Result.BUFFER_TOO_SMALL == -3
        assert Result.IO_FAILED == -4
        assert Result.MEMORY_ALLOCATION == -5
        assert Result.INVALID_INPUT == -6
        assert Result.PARSE_FAILED == -7

    def test_ok_property(self) -> None:
        assert Result.OK.ok
        assert not Result.IO_FAILED.ok

    def test_every_result_has_message(self) -> None:
        for result in Result:
            assert result.message

    def test_messages(self) -> None:
        assert Result.OK.message == "Success"
        assert Result.NULL_ARGUMENT.message == "Null pointer argument"
        assert Result.BUFFER_TOO_SMALL.message == "Output buffer too small"


class TestExceptionMapping:
    """Each exception is bound to one result."""

    @pytest.mark.parametrize(
        ("error", "result"),
        [
            (NullArgumentError(), Result.NULL_ARGUMENT),
            (InvalidSizeError(), Result.INVALID_SIZE),
            (BufferTooSmallError(), Result.BUFFER_TOO_SMALL),
            (IOFailedError("x.md"), Result.IO_FAILED),
            (AllocationError(), Result.MEMORY_ALLOCATION),
            (InvalidInputError(), Result.INVALID_INPUT),
            (ParseError("bad"), Result.PARSE_FAILED),
        ],
    )
    def test_result(self, error: MarcadorError, result: Result) -> None:
        assert isinstance(error, MarcadorError)
        assert error.result is result

    def test_default_message(self) -> None:
        assert str(NullArgumentError()) == "Null pointer argument"

    def test_buffer_too_small_sizes(self) -> None:
        error = BufferTooSmallError(10, 4)
        assert str(error) == "Output buffer too small: need 10, have 4"

    def test_io_failed_path(self) -> None:
        error = IOFailedError("notes.md", "No such file")
        assert error.path == "notes.md"
        assert str(error) == "I/O operation failed for 'notes.md': No such file"


class TestParseErrorLocation:
    """ParseError message formatting."""

    def test_full_location(self) -> None:
        error = ParseError("Bad", lineno=3, col_offset=5, source_file="doc.md")
        assert str(error) == "doc.md:3:5 Bad"

    def test_line_only(self) -> None:
        assert str(ParseError("Bad", lineno=3)) == "3 Bad"

    def test_no_location(self) -> None:
        assert str(ParseError("Bad")) == "Bad"


class TestRaiseForResult:
    """Turning results back into exceptions."""

    def test_ok_does_not_raise(self) -> None:
        raise_for_result(Result.OK)

    @pytest.mark.parametrize(
        ("result", "error"),
        [
            (Result.NULL_ARGUMENT, NullArgumentError),
            (Result.INVALID_SIZE, InvalidSizeError),
            (Result.BUFFER_TOO_SMALL, BufferTooSmallError),
            (Result.IO_FAILED, IOFailedError),
            (Result.MEMORY_ALLOCATION, AllocationError),
            (Result.INVALID_INPUT, InvalidInputError),
            (Result.PARSE_FAILED, ParseError),
        ],
    )
    def test_raises_matching(self, result: Result, error: type[MarcadorError]) -> None:
        with pytest.raises(error):
            raise_for_result(result)
