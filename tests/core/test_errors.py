"""Tests for error types and codes."""

import pytest

from codecopy.core.errors import (
    ClipboardError,
    CodeCopyError,
    ConfigError,
    ErrorCode,
    GrammarError,
    ParseError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.GRAMMAR_NOT_FOUND, 3000),
            (ErrorCode.GRAMMAR_LOAD_FAILED, 3000),
            (ErrorCode.PARSE_FAILED, 3000),
            (ErrorCode.CLIPBOARD_UNAVAILABLE, 4000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestCodeCopyError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CodeCopyError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        error = CodeCopyError(code=ErrorCode.PARSE_FAILED, message="Something broke")

        assert str(error) == "[3003] PARSE_FAILED: Something broke"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors are real exceptions."""
        with pytest.raises(CodeCopyError) as exc_info:
            raise ParseError.failed("rust", "boom")

        assert exc_info.value.code == ErrorCode.PARSE_FAILED


class TestConstructors:
    """Classmethod constructors fill code, message, and details."""

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("headers.plain_text", "maybe", "not a bool")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "headers.plain_text" in error.message
        assert error.details == {
            "field": "headers.plain_text",
            "value": "maybe",
            "reason": "not a bool",
        }

    def test_grammar_not_found(self) -> None:
        error = GrammarError.not_found("rust", "/opt/rust.so")

        assert error.code == ErrorCode.GRAMMAR_NOT_FOUND
        assert error.details["location"] == "/opt/rust.so"
        assert not error.retryable

    def test_grammar_load_failed(self) -> None:
        error = GrammarError.load_failed("rust", "bad ABI")

        assert error.error_name == "GRAMMAR_LOAD_FAILED"
        assert "bad ABI" in error.message

    def test_parse_failed_is_retryable(self) -> None:
        """A parse failure is scoped to one request, so retrying may succeed."""
        assert ParseError.failed("rust", "timeout").retryable

    def test_clipboard_unavailable(self) -> None:
        error = ClipboardError.unavailable("no xclip")

        assert error.code == ErrorCode.CLIPBOARD_UNAVAILABLE
        assert error.details == {"reason": "no xclip"}
