"""Filesystem models for entry classification and removal outcomes.

This module defines the data structures used when a scoped path is
cleaned up: what kind of entry sits at the path, and how its removal went.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Type of filesystem entry found at a path.

    A final symbolic link is never followed, so a link to a directory
    is reported as SYMLINK rather than DIRECTORY.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file.
        SYMLINK: Symbolic link, whether or not its target exists.
        OTHER: Any other entry (fifo, socket, device node).
        MISSING: Nothing exists at the path.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of a single removal attempt.

    Attributes:
        path: Path that was operated on.
        entry_type: Type of the entry found before removal.
        success: Whether nothing is left at the path afterwards.
        error: Error message if the removal failed, None otherwise.
    """

    path: str
    entry_type: EntryType
    success: bool
    error: str | None = None

    @property
    def removed(self) -> bool:
        """Check if an existing entry was actually deleted."""
        return self.success and self.entry_type is not EntryType.MISSING
