"""Rich console formatting utilities.

Provides consistent formatting for console output using Rich.
"""

import logging
import sys
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fileman.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )


def print_entries(title: str, paths: Iterable[str], marker: str = "- ") -> None:
    """Print a titled list of paths, one per line.

    Args:
        title: Header printed above the entries.
        paths: Paths to print.
        marker: Prefix printed before each path.
    """
    console.print(f"\n[bold_header]{escape(title)}[/]")
    for path in paths:
        console.print(f"{escape(marker)}[entry]{escape(path)}[/]", soft_wrap=True)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
