"""Exception hierarchy for scopepath.

Scope-exit cleanup never raises; these exceptions only surface from the
explicit operations (``AutoDeletePath.delete``, ``remove_entry`` and the
content-writing temp constructors).
"""


class ScopePathError(Exception):
    """Base exception for scopepath errors."""


class DeletionError(ScopePathError):
    """Raised when an explicit removal of a filesystem entry fails.

    Attributes:
        path: Path of the entry that could not be removed.
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class MaterializeError(ScopePathError):
    """Raised when content cannot be written to a temporary path."""
