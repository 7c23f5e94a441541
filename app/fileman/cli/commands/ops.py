"""One-shot filesystem commands.

Expose each FilesystemOperator operation as a top-level command for
scripting. Every command prints the same status message the interactive
shell prints and exits with code 1 when the status reports an error.
"""

from typing import Annotated

import typer

from fileman.cli.display import print_result
from fileman.filesystem.models import OperationResult
from fileman.filesystem.operator import FilesystemOperator
from fileman.utils.formatting import print_info


def _finish(result: OperationResult, title: str | None = None) -> None:
    """Print a result and exit non-zero if it failed."""
    print_result(result, title=title)
    if result.failed:
        raise typer.Exit(code=1)


def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list.")],
) -> None:
    """List the contents of a directory."""
    _finish(FilesystemOperator().list_directory(path), title="Directory Contents:")


def create_file(
    path: Annotated[str, typer.Argument(help="File to create or truncate.")],
) -> None:
    """Create an empty file."""
    _finish(FilesystemOperator().create_file(path))


def delete_file(
    path: Annotated[str, typer.Argument(help="File to delete.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a file."""
    if not yes and not typer.confirm("Are you sure you want to delete this file?", default=False):
        print_info("Operation canceled.")
        return
    _finish(FilesystemOperator().delete_file(path))


def create_directory(
    path: Annotated[str, typer.Argument(help="Directory to create.")],
) -> None:
    """Create a directory. Parent directories must exist."""
    _finish(FilesystemOperator().create_directory(path))


def delete_directory(
    path: Annotated[str, typer.Argument(help="Directory to delete with all its contents.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a directory and everything in it."""
    if not yes and not typer.confirm(
        "Are you sure you want to delete this directory?", default=False
    ):
        print_info("Operation canceled.")
        return
    _finish(FilesystemOperator().delete_directory(path))


def rename(
    old_path: Annotated[str, typer.Argument(help="Current path.")],
    new_path: Annotated[str, typer.Argument(help="New path.")],
) -> None:
    """Rename or move a file or directory."""
    _finish(FilesystemOperator().rename(old_path, new_path))


def search(
    path: Annotated[str, typer.Argument(help="Directory to search recursively.")],
    substring: Annotated[str, typer.Argument(help="Text to look for in file names.")],
) -> None:
    """Find files whose name contains SUBSTRING.

    Examples:
        fileman find . .py
        fileman find ~/Documents report
    """
    _finish(FilesystemOperator().search(path, substring), title="Search Results:")
