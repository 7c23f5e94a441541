"""Utility modules for fileman.

This module exports commonly used utility functions.
"""

from fileman.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_entries,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_entries",
    "print_error",
    "print_info",
    "print_success",
]
