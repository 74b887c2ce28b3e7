"""Scoped filesystem path that deletes its entry when it goes out of scope.

An AutoDeletePath owns a path. When the handle's lifetime ends, the file
or directory at that path is removed (recursively for directories),
unless deletion was disabled with ``hold()``.

The lifetime ends either when a ``with`` block using the handle exits
(normally or through an exception), or when the handle is garbage
collected. Cleanup runs at most once and never raises; failures are
logged as warnings.

Example:
    with AutoDeletePath.temp() as workdir:
        workdir.mkdir()
        (workdir / "out.txt").write_text("data")
    # workdir and its contents are gone here
"""

import logging
import os
import weakref
from pathlib import Path, PurePath
from types import TracebackType
from typing import Any, Self

from scopepath.configs.settings import TempPathSettings
from scopepath.core.temp import create_temp_path
from scopepath.errors import MaterializeError
from scopepath.filesystem.models import RemovalResult
from scopepath.filesystem.remover import discard_entry, remove_entry

logger = logging.getLogger(__name__)


def _cleanup(path: str) -> RemovalResult:
    # Must not reference the handle itself, or it would never be collected
    return discard_entry(path)


class AutoDeletePath:
    """Path handle that removes its filesystem entry at end of scope.

    The handle can be used wherever a path is expected: it implements
    ``os.PathLike``, supports ``/`` joins, and forwards public attribute
    access (``suffix``, ``exists()``, ``read_text()``, ...) to the
    underlying ``pathlib.Path``.

    Attributes:
        _path: The owned path, as given.
        _target: Absolute form of the path, fixed at construction so that a
            later working directory change cannot redirect the removal.
        _finalizer: Pending cleanup; alive while the handle is armed.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Wrap a path. No filesystem access happens here.

        Args:
            path: Path to take ownership of. It does not need to exist yet.
        """
        self._path = Path(path)
        self._target = self._path.absolute()
        self._finalizer = weakref.finalize(self, _cleanup, str(self._target))

    # -------------------------------------------------------------------------
    # Constructors for temporary paths
    # -------------------------------------------------------------------------

    @classmethod
    def temp(cls, settings: TempPathSettings | None = None) -> Self:
        """Create a handle over a fresh path in the temp directory.

        Only the path is generated; create the file or directory yourself.

        Args:
            settings: Where and how to name the path. If None, uses defaults.

        Returns:
            Armed handle over a path that does not exist yet.
        """
        return cls(create_temp_path(settings))

    @classmethod
    def temp_in(cls, directory: str | os.PathLike[str]) -> Self:
        """Create a handle over a fresh path inside ``directory``.

        Args:
            directory: Parent directory for the generated path.

        Returns:
            Armed handle over a path that does not exist yet.
        """
        return cls.temp(TempPathSettings(directory=Path(directory)))

    @classmethod
    def from_bytes(cls, data: bytes, settings: TempPathSettings | None = None) -> Self:
        """Create a temp handle and write ``data`` to it as a file.

        Args:
            data: File content.
            settings: Where and how to name the path. If None, uses defaults.

        Returns:
            Armed handle over the newly written file.

        Raises:
            MaterializeError: If the file cannot be written.
        """
        handle = cls.temp(settings)
        try:
            handle._path.write_bytes(data)
        except OSError as e:
            handle.cleanup()
            raise MaterializeError(f"Failed to write {handle._path}: {e}") from e
        return handle

    @classmethod
    def from_file(
        cls,
        source: str | os.PathLike[str],
        settings: TempPathSettings | None = None,
    ) -> Self:
        """Copy a resource file's content into a new temp handle.

        Useful in tests that must not modify their fixture files.

        Args:
            source: File whose bytes are copied.
            settings: Where and how to name the path. If None, uses defaults.

        Returns:
            Armed handle over the copy.

        Raises:
            MaterializeError: If the source cannot be read or the copy written.
        """
        try:
            data = Path(source).read_bytes()
        except OSError as e:
            raise MaterializeError(f"Failed to read {source}: {e}") from e
        return cls.from_bytes(data, settings)

    # -------------------------------------------------------------------------
    # Ownership control
    # -------------------------------------------------------------------------

    @property
    def path(self) -> Path:
        """The owned path."""
        return self._path

    @property
    def armed(self) -> bool:
        """Check if the entry will still be removed at end of scope."""
        return self._finalizer.alive

    def hold(self) -> Path:
        """Cancel the pending cleanup and hand out the plain path.

        Permanent for this handle. Calling it again is harmless.

        Returns:
            The owned path; the entry at it is left in place.
        """
        if self._finalizer.detach() is not None:
            logger.debug("Holding %s, cleanup cancelled", self._path)
        return self._path

    def delete(self) -> RemovalResult | None:
        """Remove the entry now, reporting failures.

        Unlike scope-exit cleanup, errors propagate. The handle is
        disarmed either way.

        Returns:
            RemovalResult, or None if the handle was already disarmed
            (held, deleted, or cleaned up).

        Raises:
            DeletionError: If the entry exists and cannot be removed.
        """
        if self._finalizer.detach() is None:
            return None
        return remove_entry(self._target)

    def cleanup(self) -> RemovalResult | None:
        """Run the scope-exit cleanup now instead of waiting for it.

        Best-effort: never raises, failures are logged.

        Returns:
            RemovalResult, or None if the handle was already disarmed.
        """
        return self._finalizer()

    # -------------------------------------------------------------------------
    # Scope protocol
    # -------------------------------------------------------------------------

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    # -------------------------------------------------------------------------
    # Transparent path access
    # -------------------------------------------------------------------------

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r}, armed={self.armed})"

    def __truediv__(self, other: str | os.PathLike[str]) -> Path:
        return self._path / other

    def __rtruediv__(self, other: str | os.PathLike[str]) -> Path:
        return Path(other) / self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AutoDeletePath):
            return self._path == other._path
        if isinstance(other, PurePath):
            return self._path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the handle itself
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._path, name)

    def __reduce_ex__(self, protocol: Any) -> Any:
        # A copy would be a second owner of the same entry
        raise TypeError(
            f"{type(self).__name__} cannot be copied or pickled; use hold() to take the plain path"
        )
