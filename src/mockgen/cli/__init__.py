# src/mockgen/cli/__init__.py
"""Typer entry point for the `mockgen` command.

Commands here only parse arguments and render results; the work happens
in mockgen.commands.
"""

from mockgen.cli.app import app, console

__all__ = ["app", "console"]
