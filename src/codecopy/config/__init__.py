"""Config module exports."""

from codecopy.config.loader import CodeCopySettings, load_config
from codecopy.config.models import (
    CodeCopyConfig,
    GitConfig,
    GrammarsConfig,
    HeadersConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "CodeCopyConfig",
    "CodeCopySettings",
    "GitConfig",
    "GrammarsConfig",
    "HeadersConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
