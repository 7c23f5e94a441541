"""Filesystem operations module.

This module provides the status-code based operations provider used by
the interactive shell and the one-shot commands.
"""

from fileman.filesystem.models import OperationResult, StatusCode
from fileman.filesystem.operator import FilesystemOperator

__all__ = [
    "FilesystemOperator",
    "OperationResult",
    "StatusCode",
]
