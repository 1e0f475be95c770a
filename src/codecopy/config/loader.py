"""Layered configuration for codecopy.

Later layers win, key by key:

    built-in defaults
    ~/.config/codecopy/config.yaml
    <workspace>/.codecopy/config.yaml
    CODECOPY__SECTION__KEY environment variables
    keyword overrides passed to load_config()

YAML layers are merged into one mapping before pydantic-settings sees
them; env and kwargs are layered on top by pydantic-settings itself.
"""

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from codecopy.config.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from codecopy.config.models import (
    CodeCopyConfig,
    GitConfig,
    GrammarsConfig,
    HeadersConfig,
    LoggingConfig,
)
from codecopy.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/codecopy/config.yaml").expanduser()

# Merged YAML for the load_config() call running in this context
_file_layers: ContextVar[dict[str, Any]] = ContextVar("file_layers", default={})


def repo_config_path(workspace_root: Path) -> Path:
    return workspace_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _load_yaml(path: Path) -> dict[str, Any]:
    """Read one YAML layer; a missing file is an empty layer."""
    if not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge nested mappings; any non-mapping value in ``override`` replaces."""
    merged = dict(base)
    for key, incoming in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = _deep_merge(current, incoming)
        else:
            merged[key] = incoming
    return merged


class _FileLayersSource(PydanticBaseSettingsSource):
    """Serves the YAML layers bound by load_config()."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:  # noqa: ARG002
        value = _file_layers.get().get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        return dict(_file_layers.get())


class CodeCopySettings(BaseSettings):
    """Env-aware root config. Env vars: CODECOPY__LOGGING__LEVEL, CODECOPY__GIT__REMOTE, etc."""

    model_config = SettingsConfigDict(
        env_prefix="CODECOPY__",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = LoggingConfig()
    headers: HeadersConfig = HeadersConfig()
    grammars: GrammarsConfig = GrammarsConfig()
    git: GitConfig = GitConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # First source wins
        return (init_settings, env_settings, _FileLayersSource(settings_cls))


def _invalid_value(exc: ValidationError) -> ConfigError:
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return ConfigError.invalid_value(field, first.get("input"), first["msg"])


def load_config(workspace_root: Path | None = None, **overrides: Any) -> CodeCopyConfig:
    """Resolve configuration for a workspace.

    Args:
        workspace_root: Directory holding ``.codecopy/config.yaml``;
            the current directory when omitted.
        **overrides: Section values that beat every other layer,
            e.g. ``headers={"plain_text": True}``.

    Raises:
        ConfigError: A YAML layer is unreadable or a value fails validation.
    """
    root = workspace_root or Path.cwd()
    layers = _deep_merge(_load_yaml(GLOBAL_CONFIG_PATH), _load_yaml(repo_config_path(root)))

    token = _file_layers.set(layers)
    try:
        settings = CodeCopySettings(**overrides)
    except ValidationError as e:
        raise _invalid_value(e) from e
    finally:
        _file_layers.reset(token)
    return CodeCopyConfig.model_validate(settings.model_dump())
