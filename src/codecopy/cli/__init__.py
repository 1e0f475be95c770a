"""CodeCopy CLI."""

from codecopy.cli.main import cli

__all__ = ["cli"]
