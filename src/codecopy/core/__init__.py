"""Core module exports."""

from codecopy.core.console import get_console, show_error, show_info, status
from codecopy.core.errors import (
    ClipboardError,
    CodeCopyError,
    ConfigError,
    ErrorCode,
    GrammarError,
    ParseError,
)
from codecopy.core.logging import (
    clear_action_id,
    configure_logging,
    copy_action,
    get_action_id,
    get_logger,
    set_action_id,
)

__all__ = [
    # Errors
    "ClipboardError",
    "CodeCopyError",
    "ConfigError",
    "ErrorCode",
    "GrammarError",
    "ParseError",
    # Logging
    "clear_action_id",
    "configure_logging",
    "copy_action",
    "get_action_id",
    "get_logger",
    "set_action_id",
    # Console
    "get_console",
    "show_error",
    "show_info",
    "status",
]
