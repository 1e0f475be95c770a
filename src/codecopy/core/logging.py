"""Logging setup for codecopy.

structlog events are rendered by stdlib handlers, one per configured
output, so a file can keep DEBUG detail while stderr shows warnings
only. Events logged inside a copy action carry that action's
``action_id``.

Usage::

    configure_logging(config=config.logging)

    with copy_action() as action_id:
        log.info("snippet_built", file="src/lib.rs")   # action_id=... added
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from codecopy.config.models import LoggingConfig, LogOutputConfig

_action_id: ContextVar[str | None] = ContextVar("action_id", default=None)

# First file destination of the active configuration
_active_log_file: Path | None = None


def get_action_id() -> str | None:
    return _action_id.get()


def set_action_id(action_id: str | None = None) -> str:
    """Bind (or generate) the id correlating one copy action's events."""
    aid = action_id or uuid4().hex[:12]
    _action_id.set(aid)
    return aid


def clear_action_id() -> None:
    _action_id.set(None)


@contextmanager
def copy_action(action_id: str | None = None) -> Iterator[str]:
    """Scope an action id to a block; cleared on exit even if the block raises."""
    aid = set_action_id(action_id)
    try:
        yield aid
    finally:
        clear_action_id()


def get_log_file_path() -> Path | None:
    """File the current configuration logs to, if any (for error pointers)."""
    return _active_log_file


def _stamp_action_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    aid = _action_id.get()
    if aid is not None:
        event_dict.setdefault("action_id", aid)
    return event_dict


def _level(name: str | None, default: int) -> int:
    if not name:
        return default
    return logging.getLevelNamesMapping().get(name.upper(), default)


def _open_stream(destination: str) -> logging.Handler:
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _formatter(output: LogOutputConfig, pre_chain: list[structlog.types.Processor]) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        to_terminal = output.destination in ("stderr", "stdout") and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=to_terminal, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """(Re)configure structlog and the root stdlib logger.

    Args:
        config: Full logging config with per-output formats and levels.
            When omitted, a single stderr output at ``level`` is used.
        json_format: Render the implicit stderr output as JSON.
        level: Root level when ``config`` is omitted.

    Safe to call repeatedly: existing root handlers are closed first.
    """
    global _active_log_file
    from codecopy.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )
    root_level = _level(config.level, logging.WARNING)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _stamp_action_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are resolved per call so reconfiguration takes effect at once
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for stale in list(root.handlers):
        root.removeHandler(stale)
        stale.close()
    root.setLevel(root_level)

    _active_log_file = None
    for output in config.outputs:
        handler = _open_stream(output.destination)
        handler.setLevel(_level(output.level, root_level))
        handler.setFormatter(_formatter(output, pre_chain))
        root.addHandler(handler)
        if _active_log_file is None and isinstance(handler, logging.FileHandler):
            _active_log_file = Path(output.destination)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger  # type: ignore[no-any-return]
