"""Recursive path removal with reclaimed-size accounting.

Removal is best-effort: within a directory, a child that fails to be
removed is reported and skipped while its siblings are still removed.
If the directory itself then cannot be removed, the failure carries the
bytes already reclaimed from its children.

Entries are inspected with ``lstat`` and symbolic links are never
followed: a link is unlinked itself and reclaims nothing. Other
non-regular entries (fifos, sockets, devices) are left in place and
reclaim nothing.
"""

import logging
import stat
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


class RemoveError(Exception):
    """Base exception for a path that could not be removed.

    Attributes:
        path: The path being removed.
        cause: The underlying OS error.
        reclaimed: Bytes freed under ``path`` before the failure.
    """

    action = "remove"

    def __init__(self, path: Path, cause: OSError, reclaimed: int = 0) -> None:
        self.path = path
        self.cause = cause
        self.reclaimed = reclaimed
        super().__init__(f"failed to {self.action} {path}: {cause.strerror or cause}")


class InspectFailedError(RemoveError):
    """Raised when a path's metadata cannot be read."""

    action = "inspect"


class RemoveFileFailedError(RemoveError):
    """Raised when a regular file cannot be deleted."""

    action = "remove file"


class RemoveLinkFailedError(RemoveError):
    """Raised when a symbolic link cannot be deleted."""

    action = "remove link"


class ReadDirectoryFailedError(RemoveError):
    """Raised when a directory's children cannot be listed."""

    action = "read directory"


class RemoveDirectoryFailedError(RemoveError):
    """Raised when a directory cannot be deleted after its children."""

    action = "remove directory"


ErrorHandler = Callable[[RemoveError], None]


def remove_path(path: Path, on_error: ErrorHandler | None = None) -> int:
    """Remove a path, recursing into directories depth-first.

    Args:
        path: File, directory or link to remove.
        on_error: Called with each child failure inside a directory tree.
            When None, child failures are logged at WARNING.

    Returns:
        Total bytes of regular files removed.

    Raises:
        InspectFailedError: If ``path`` cannot be inspected.
        RemoveFileFailedError: If ``path`` is a file that cannot be removed.
        RemoveLinkFailedError: If ``path`` is a link that cannot be removed.
        ReadDirectoryFailedError: If ``path`` is a directory that cannot be listed.
        RemoveDirectoryFailedError: If ``path`` is a directory that cannot be
            removed once its children have been processed.
    """
    try:
        st = path.lstat()
    except OSError as e:
        raise InspectFailedError(path, e) from e

    mode = st.st_mode

    if stat.S_ISREG(mode):
        try:
            path.unlink()
        except OSError as e:
            raise RemoveFileFailedError(path, e) from e
        return st.st_size

    if stat.S_ISLNK(mode):
        try:
            path.unlink()
        except OSError as e:
            raise RemoveLinkFailedError(path, e) from e
        return 0

    if stat.S_ISDIR(mode):
        return _remove_directory(path, on_error)

    logger.debug("Leaving non-regular entry in place: %s", path)
    return 0


def _remove_directory(path: Path, on_error: ErrorHandler | None) -> int:
    """Remove a directory's children, then the directory itself."""
    try:
        children = sorted(path.iterdir())
    except OSError as e:
        raise ReadDirectoryFailedError(path, e) from e

    reclaimed = 0
    for child in children:
        try:
            reclaimed += remove_path(child, on_error)
        except RemoveError as e:
            reclaimed += e.reclaimed
            if on_error is not None:
                on_error(e)
            else:
                logger.warning("Skipping %s", e)

    try:
        path.rmdir()
    except OSError as e:
        raise RemoveDirectoryFailedError(path, e, reclaimed=reclaimed) from e

    return reclaimed
