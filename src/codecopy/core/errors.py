"""codecopy error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Context (grammar loading, parsing)
- 4xxx: Output (clipboard)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Context (3xxx)
    GRAMMAR_NOT_FOUND = 3001
    GRAMMAR_LOAD_FAILED = 3002
    PARSE_FAILED = 3003

    # Output (4xxx)
    CLIPBOARD_UNAVAILABLE = 4001


@dataclass(frozen=True, slots=True)
class CodeCopyError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'GRAMMAR_LOAD_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeCopyError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class GrammarError(CodeCopyError):
    """Grammar could not be located or loaded. Permanent for the process."""

    @classmethod
    def not_found(cls, language: str, location: str) -> "GrammarError":
        return cls(
            code=ErrorCode.GRAMMAR_NOT_FOUND,
            message=f"Grammar for '{language}' not found at {location}",
            details={"language": language, "location": location},
        )

    @classmethod
    def load_failed(cls, language: str, reason: str) -> "GrammarError":
        return cls(
            code=ErrorCode.GRAMMAR_LOAD_FAILED,
            message=f"Failed to load grammar for '{language}': {reason}",
            details={"language": language, "reason": reason},
        )


class ParseError(CodeCopyError):
    """Parsing a single text failed. Scoped to one request."""

    @classmethod
    def failed(cls, language: str, reason: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_FAILED,
            message=f"Failed to parse {language} source: {reason}",
            retryable=True,
            details={"language": language, "reason": reason},
        )


class ClipboardError(CodeCopyError):
    """Clipboard could not be written."""

    @classmethod
    def unavailable(cls, reason: str) -> "ClipboardError":
        return cls(
            code=ErrorCode.CLIPBOARD_UNAVAILABLE,
            message=f"Clipboard unavailable: {reason}",
            details={"reason": reason},
        )
