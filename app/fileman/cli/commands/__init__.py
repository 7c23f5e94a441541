"""CLI commands for fileman.

This package contains all subcommand implementations.
"""

from fileman.cli.commands import config, ops

__all__ = ["config", "ops"]
