"""Filesystem operation result models.

This module defines the status codes returned by every filesystem
operation and the immutable result object carrying them.
"""

from dataclasses import dataclass
from enum import IntEnum


class StatusCode(IntEnum):
    """Outcome of a single filesystem operation.

    Values follow HTTP status semantics as a compact vocabulary.

    Attributes:
        SUCCESS: The operation completed.
        NO_MATCHES: A search completed but found nothing.
        INVALID_REQUEST: Wrong path type, or the target already exists.
        NOT_FOUND: The path does not exist.
        SYSTEM_ERROR: Permission, I/O or any other OS-level failure.
    """

    SUCCESS = 200
    NO_MATCHES = 204
    INVALID_REQUEST = 400
    NOT_FOUND = 404
    SYSTEM_ERROR = 500

    @property
    def is_error(self) -> bool:
        """Check if this status reports a failure."""
        return self >= StatusCode.INVALID_REQUEST


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of a filesystem operation.

    Attributes:
        status: Outcome classifier.
        paths: Listing or search results. Only populated on SUCCESS.
    """

    status: StatusCode
    paths: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if self.paths and self.status != StatusCode.SUCCESS:
            msg = f"Paths are only allowed on success, got status {self.status.value}"
            raise ValueError(msg)

    @property
    def success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status == StatusCode.SUCCESS

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return self.status.is_error
