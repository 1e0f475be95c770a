"""Tests for config/models.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from codecopy.config.constants import DEFAULT_FILE_PATH_HEADERS
from codecopy.config.models import (
    CodeCopyConfig,
    GitConfig,
    HeadersConfig,
    LoggingConfig,
    LogOutputConfig,
)


class TestDefaults:
    """Built-in defaults."""

    def test_headers_default_to_source_and_lines(self) -> None:
        config = HeadersConfig()

        assert config.file_path_headers == list(DEFAULT_FILE_PATH_HEADERS) == ["source", "lines"]
        assert config.code_structure_headers == []
        assert config.plain_text is False

    def test_logging_defaults_to_warning_on_stderr(self) -> None:
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert [o.destination for o in config.outputs] == ["stderr"]

    def test_git_remote_defaults_to_origin(self) -> None:
        assert GitConfig().remote == "origin"

    def test_root_config_has_all_sections(self) -> None:
        config = CodeCopyConfig()

        assert config.grammars.paths == {}
        assert config.headers.file_path_headers == ["source", "lines"]


class TestHeadersValidation:
    """Header ids are validated against the known set."""

    def test_known_ids_accepted_in_any_order(self) -> None:
        config = HeadersConfig(
            file_path_headers=["gitBranch", "source", "repoLink"],
            code_structure_headers=["module", "function"],
        )

        assert config.file_path_headers == ["gitBranch", "source", "repoLink"]

    def test_unknown_file_path_header_rejected(self) -> None:
        with pytest.raises(ValidationError, match="bogus"):
            HeadersConfig(file_path_headers=["source", "bogus"])

    def test_unknown_code_structure_header_rejected(self) -> None:
        with pytest.raises(ValidationError, match="method"):
            HeadersConfig(code_structure_headers=["method"])


class TestLogOutputConfig:
    """Log destination validation."""

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            LogOutputConfig(destination="logs/out.log")

    def test_absolute_file_destination_accepted(self, tmp_path) -> None:
        out = LogOutputConfig(destination=str(tmp_path / "out.log"))

        assert out.destination == str(tmp_path / "out.log")

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]
