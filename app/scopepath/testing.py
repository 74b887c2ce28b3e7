"""Pytest plugin providing scoped path fixtures.

Enable it from a conftest.py:

    pytest_plugins = ["scopepath.testing"]
"""

import logging
import os
from collections.abc import Iterator
from typing import Protocol

import pytest

from scopepath.core.path import AutoDeletePath

logger = logging.getLogger(__name__)


class AutoDeletePathFactory(Protocol):
    """Signature of the ``auto_delete_path`` fixture."""

    def __call__(self, path: str | os.PathLike[str] | None = None) -> AutoDeletePath: ...


@pytest.fixture
def auto_delete_path() -> Iterator[AutoDeletePathFactory]:
    """Factory for AutoDeletePath handles tied to the test's lifetime.

    ``auto_delete_path()`` returns a handle over a fresh temp path;
    ``auto_delete_path(path)`` wraps an existing path. Handles still
    armed when the test finishes are cleaned up at teardown, even if
    the test keeps references to them.
    """
    handles: list[AutoDeletePath] = []

    def _make(path: str | os.PathLike[str] | None = None) -> AutoDeletePath:
        handle = AutoDeletePath.temp() if path is None else AutoDeletePath(path)
        handles.append(handle)
        return handle

    yield _make

    for handle in handles:
        if handle.armed:
            logger.debug("Cleaning up %s at teardown", handle.path)
            handle.cleanup()
