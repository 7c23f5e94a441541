"""CLI package for fileman.

This package contains the Typer application, the interactive shell and
all subcommands.
"""

from fileman.cli.main import app

__all__ = ["app"]
