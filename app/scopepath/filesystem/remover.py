"""Filesystem entry removal.

Two removal flavours share one strategy:
- remove_entry: explicit removal, raises DeletionError on failure.
- discard_entry: best-effort removal for scope-exit cleanup, never raises.

Strategy per entry type:
- Directories (not symlinks to directories): shutil.rmtree
- Files, symlinks, dead symlinks, fifos, sockets: Path.unlink
- Missing paths: nothing to do, counted as success
"""

import logging
import os
import shutil
import stat
from pathlib import Path

from scopepath.errors import DeletionError
from scopepath.filesystem.models import EntryType, RemovalResult

logger = logging.getLogger(__name__)


def classify_entry(path: str | os.PathLike[str]) -> EntryType:
    """Determine what kind of entry exists at a path.

    Args:
        path: Filesystem path to inspect.

    Returns:
        EntryType of the entry, MISSING if nothing exists.

    Raises:
        OSError: If the path cannot be inspected (e.g. permission denied
            on a parent directory).
    """
    # Permission errors propagate; a final symlink is not followed
    try:
        mode = os.lstat(path).st_mode
    except (FileNotFoundError, NotADirectoryError):
        return EntryType.MISSING

    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryType.FILE
    return EntryType.OTHER


def remove_entry(path: str | os.PathLike[str]) -> RemovalResult:
    """Remove the entry at a path, recursively if it is a directory.

    Args:
        path: Filesystem path to remove.

    Returns:
        RemovalResult with success=True. A missing path is not an error.

    Raises:
        DeletionError: If the entry exists and cannot be removed.
    """
    target = Path(path)
    entry_type = EntryType.MISSING

    try:
        entry_type = classify_entry(target)

        if entry_type is EntryType.MISSING:
            logger.debug("Nothing to remove at %s", target)
        elif entry_type is EntryType.DIRECTORY:
            shutil.rmtree(target)
            logger.debug("Removed directory tree %s", target)
        else:
            target.unlink()
            logger.debug("Removed %s %s", entry_type.value, target)

    except FileNotFoundError as e:
        # Removed concurrently; only a failure if something is still there
        if not _is_gone(target):
            msg = f"Failed to remove {target}: {e}"
            raise DeletionError(str(target), msg) from e
        logger.debug("Entry vanished during removal: %s", target)

    except OSError as e:
        msg = f"Failed to remove {target}: {e}"
        raise DeletionError(str(target), msg) from e

    return RemovalResult(path=str(target), entry_type=entry_type, success=True)


def discard_entry(path: str | os.PathLike[str]) -> RemovalResult:
    """Remove the entry at a path without ever raising.

    Used for scope-exit cleanup, where raising would mask an in-flight
    exception. Failures are logged as warnings and reported in the result.

    Args:
        path: Filesystem path to remove.

    Returns:
        RemovalResult describing the outcome.
    """
    try:
        return remove_entry(path)
    except DeletionError as e:
        logger.warning("Could not clean up %s: %s", e.path, e)
        return RemovalResult(
            path=e.path,
            entry_type=_safe_classify(e.path),
            success=False,
            error=str(e),
        )


def _is_gone(target: Path) -> bool:
    """Check whether nothing exists at a path, treating errors as present."""
    try:
        return classify_entry(target) is EntryType.MISSING
    except OSError:
        return False


def _safe_classify(path: str) -> EntryType:
    """Classify a path for reporting, falling back to OTHER on errors."""
    try:
        return classify_entry(path)
    except OSError:
        return EntryType.OTHER
