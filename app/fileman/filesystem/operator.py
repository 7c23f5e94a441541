"""Filesystem operations provider.

Performs one filesystem action per call against the host filesystem and
reduces every outcome to a StatusCode. No exception raised by the OS
layer escapes an operation.
"""

import logging
import os
import shutil
import stat
from collections.abc import Iterator

from fileman.filesystem.models import OperationResult, StatusCode

logger = logging.getLogger(__name__)

# Errors the OS layer raises for unusable paths (embedded NUL bytes raise ValueError)
_OS_ERRORS = (OSError, ValueError)


class FilesystemOperator:
    """Lists, creates, deletes, renames and searches filesystem paths.

    The operator holds no state. Paths are used exactly as given, without
    normalization or sandboxing.
    """

    def list_directory(self, path: str) -> OperationResult:
        """List the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            OperationResult with child paths sorted by name on SUCCESS,
            NOT_FOUND if the path is missing, INVALID_REQUEST if it is not
            a directory, SYSTEM_ERROR on OS failure.
        """
        try:
            st = _stat(path)
            if st is None:
                logger.info("Path does not exist: %s", path)
                return OperationResult(StatusCode.NOT_FOUND)
            if not stat.S_ISDIR(st.st_mode):
                logger.info("Path is not a directory: %s", path)
                return OperationResult(StatusCode.INVALID_REQUEST)

            with os.scandir(path) as it:
                names = sorted(entry.name for entry in it)
            return OperationResult(
                StatusCode.SUCCESS,
                tuple(os.path.join(path, name) for name in names),
            )
        except _OS_ERRORS as e:
            logger.warning("Error accessing directory %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def create_file(self, path: str) -> OperationResult:
        """Create an empty file, truncating it if it already exists.

        Args:
            path: File to create.

        Returns:
            OperationResult with SUCCESS, or SYSTEM_ERROR if the file
            cannot be created.
        """
        try:
            with open(path, "w"):
                pass
            return OperationResult(StatusCode.SUCCESS)
        except _OS_ERRORS as e:
            logger.warning("Error creating file %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def delete_file(self, path: str) -> OperationResult:
        """Delete a regular file.

        Args:
            path: File to delete.

        Returns:
            OperationResult with SUCCESS, NOT_FOUND if the path is missing,
            INVALID_REQUEST if it is not a regular file, SYSTEM_ERROR on
            OS failure.
        """
        try:
            st = _stat(path)
            if st is None:
                logger.info("File does not exist: %s", path)
                return OperationResult(StatusCode.NOT_FOUND)
            if not stat.S_ISREG(st.st_mode):
                logger.info("Path is not a regular file: %s", path)
                return OperationResult(StatusCode.INVALID_REQUEST)

            os.remove(path)
            return OperationResult(StatusCode.SUCCESS)
        except _OS_ERRORS as e:
            logger.warning("Error deleting file %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def create_directory(self, path: str) -> OperationResult:
        """Create a single directory. Parents are not created.

        Args:
            path: Directory to create.

        Returns:
            OperationResult with SUCCESS, INVALID_REQUEST if the path
            already exists, SYSTEM_ERROR on OS failure.
        """
        try:
            if _stat(path) is not None:
                logger.info("Directory already exists: %s", path)
                return OperationResult(StatusCode.INVALID_REQUEST)

            os.mkdir(path)
            return OperationResult(StatusCode.SUCCESS)
        except _OS_ERRORS as e:
            logger.warning("Error creating directory %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def delete_directory(self, path: str) -> OperationResult:
        """Delete a directory and everything below it.

        A symlink to a directory is removed as a link; its target is
        left untouched.

        Args:
            path: Directory to delete.

        Returns:
            OperationResult with SUCCESS, NOT_FOUND if the path is missing,
            INVALID_REQUEST if it is not a directory, SYSTEM_ERROR on
            OS failure.
        """
        try:
            st = _stat(path)
            if st is None:
                logger.info("Directory does not exist: %s", path)
                return OperationResult(StatusCode.NOT_FOUND)
            if not stat.S_ISDIR(st.st_mode):
                logger.info("Path is not a directory: %s", path)
                return OperationResult(StatusCode.INVALID_REQUEST)

            if os.path.islink(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
            return OperationResult(StatusCode.SUCCESS)
        except _OS_ERRORS as e:
            logger.warning("Error deleting directory %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def rename(self, old_path: str, new_path: str) -> OperationResult:
        """Rename or move a file or directory.

        An existing destination is overwritten where the host allows it.

        Args:
            old_path: Current path.
            new_path: Destination path.

        Returns:
            OperationResult with SUCCESS, NOT_FOUND if the source is
            missing, SYSTEM_ERROR on OS failure.
        """
        try:
            if _stat(old_path) is None:
                logger.info("Source path does not exist: %s", old_path)
                return OperationResult(StatusCode.NOT_FOUND)

            os.replace(old_path, new_path)
            return OperationResult(StatusCode.SUCCESS)
        except _OS_ERRORS as e:
            logger.warning("Error renaming %s to %s: %s", old_path, new_path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

    def search(self, path: str, substring: str) -> OperationResult:
        """Recursively find entries whose name contains a substring.

        The match is literal and case-sensitive. Files and directories are
        both matched. Directories the process may not read are skipped,
        and symlinked directories are not descended into.

        Args:
            path: Root directory of the search.
            substring: Text to look for in entry names. Empty matches all.

        Returns:
            OperationResult with matching paths on SUCCESS, NO_MATCHES if
            nothing matched, NOT_FOUND / INVALID_REQUEST for a bad root,
            SYSTEM_ERROR on OS failure.
        """
        try:
            st = _stat(path)
            if st is None:
                logger.info("Directory does not exist: %s", path)
                return OperationResult(StatusCode.NOT_FOUND)
            if not stat.S_ISDIR(st.st_mode):
                logger.info("Path is not a directory: %s", path)
                return OperationResult(StatusCode.INVALID_REQUEST)

            matches = list(self._walk_matches(path, substring))
        except _OS_ERRORS as e:
            logger.warning("Error searching %s: %s", path, e)
            return OperationResult(StatusCode.SYSTEM_ERROR)

        if not matches:
            return OperationResult(StatusCode.NO_MATCHES)
        return OperationResult(StatusCode.SUCCESS, tuple(matches))

    def _walk_matches(self, root: str, substring: str) -> Iterator[str]:
        """Yield matching descendants of root in top-down, name-sorted order."""
        for dirpath, dirnames, filenames in os.walk(root, onerror=_skip_permission_denied):
            dirnames.sort()
            for name in sorted(dirnames + filenames):
                if substring in name:
                    yield os.path.join(dirpath, name)


def _skip_permission_denied(error: OSError) -> None:
    """Ignore unreadable directories during a walk, re-raise anything else."""
    if isinstance(error, PermissionError):
        logger.debug("Skipping unreadable directory: %s", error.filename)
        return
    raise error


def _stat(path: str) -> os.stat_result | None:
    """Stat a path, following symlinks.

    Returns:
        The stat result, or None if the path (or one of its parents) does
        not exist. Any other OSError, such as a permission or name-length
        failure, propagates to the caller.
    """
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None
