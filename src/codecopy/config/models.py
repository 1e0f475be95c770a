"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODECOPY__SECTION__KEY)
3. Repo YAML (.codecopy/config.yaml)
4. Global YAML (~/.config/codecopy/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODECOPY__<SECTION>__<KEY>=<VALUE>

Examples:
    CODECOPY__LOGGING__LEVEL=DEBUG
    CODECOPY__HEADERS__PLAIN_TEXT=true
    CODECOPY__GIT__REMOTE=upstream
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from codecopy.config.constants import (
    CODE_STRUCTURE_HEADER_IDS,
    DEFAULT_FILE_PATH_HEADERS,
    FILE_PATH_HEADER_IDS,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CODECOPY__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The CLI's -v flag forces DEBUG.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class HeadersConfig(BaseModel):
    """Which header lines precede the copied code, and how they render.

    Env vars:
        CODECOPY__HEADERS__PLAIN_TEXT: Render "Label: value" without a code fence
    """

    file_path_headers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILE_PATH_HEADERS),
        description=f"Ordered file/git headers. Known ids: {', '.join(FILE_PATH_HEADER_IDS)}.",
    )
    code_structure_headers: list[str] = Field(
        default_factory=list,
        description=f"Ordered structure headers. Known ids: {', '.join(CODE_STRUCTURE_HEADER_IDS)}.",
    )
    plain_text: bool = Field(
        default=False,
        description="Plain 'Label: value' headers and an unfenced body instead of Markdown.",
    )

    @field_validator("file_path_headers")
    @classmethod
    def validate_file_path_headers(cls, v: list[str]) -> list[str]:
        unknown = [h for h in v if h not in FILE_PATH_HEADER_IDS]
        if unknown:
            raise ValueError(f"Unknown file path header(s): {', '.join(unknown)}")
        return v

    @field_validator("code_structure_headers")
    @classmethod
    def validate_code_structure_headers(cls, v: list[str]) -> list[str]:
        unknown = [h for h in v if h not in CODE_STRUCTURE_HEADER_IDS]
        if unknown:
            raise ValueError(f"Unknown code structure header(s): {', '.join(unknown)}")
        return v


class GrammarsConfig(BaseModel):
    """Grammar resource locations.

    By default grammars come from their Python distributions
    (tree-sitter-rust, ...). A path here points at a precompiled
    shared library instead, relative to the workspace root.
    """

    paths: dict[str, str] = Field(
        default_factory=dict,
        description="Language id -> relative path of a compiled grammar library, "
        "e.g. {rust: grammars/rust.so}.",
    )


class GitConfig(BaseModel):
    """Git metadata configuration.

    Env vars:
        CODECOPY__GIT__REMOTE: Remote used for repository links (default: origin)
    """

    remote: str = Field(
        default="origin",
        description="Remote whose URL is turned into repository permalinks.",
    )


class CodeCopyConfig(BaseModel):
    """Root configuration for codecopy.

    All settings can be configured via:
    1. Environment variables: CODECOPY__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    headers: HeadersConfig = Field(default_factory=HeadersConfig)
    grammars: GrammarsConfig = Field(default_factory=GrammarsConfig)
    git: GitConfig = Field(default_factory=GitConfig)
