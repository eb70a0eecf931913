"""CLI commands for fxjournal.

This package provides the command-line interface for fxjournal,
including the session gate, the trade log, the dashboard and
account growth commands.
"""

from fxjournal.cli.main import cli, main

__all__ = ["cli", "main"]
