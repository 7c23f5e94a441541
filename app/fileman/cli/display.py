"""Shared display functions for operation results.

Maps status codes to their user-facing messages and renders listing
and search results for both the interactive shell and the one-shot
commands.
"""

from rich.markup import escape

from fileman.filesystem.models import OperationResult, StatusCode
from fileman.utils.formatting import console, print_entries

STATUS_MESSAGES: dict[StatusCode, str] = {
    StatusCode.SUCCESS: "Operation successful.",
    StatusCode.NO_MATCHES: "No files found matching the criteria.",
    StatusCode.INVALID_REQUEST: "Error: Invalid path or resource already exists.",
    StatusCode.NOT_FOUND: "Error: File or directory not found.",
    StatusCode.SYSTEM_ERROR: "Error: System error occurred. Please check your input or permissions.",
}

_STATUS_STYLES: dict[StatusCode, str] = {
    StatusCode.SUCCESS: "success",
    StatusCode.NO_MATCHES: "info",
    StatusCode.INVALID_REQUEST: "error",
    StatusCode.NOT_FOUND: "error",
    StatusCode.SYSTEM_ERROR: "error",
}


def print_status(status: StatusCode) -> None:
    """Print the message tied to a status code."""
    style = _STATUS_STYLES[status]
    console.print(f"\n[{style}]{escape(STATUS_MESSAGES[status])}[/]")


def print_result(result: OperationResult, title: str | None = None, marker: str = "- ") -> None:
    """Print the status message of a result and, on success, its paths.

    Args:
        result: Result returned by a FilesystemOperator call.
        title: Header for the path list. If None, paths are not printed.
        marker: Prefix printed before each path.
    """
    print_status(result.status)
    if title is not None and result.success:
        print_entries(title, result.paths, marker=marker)
