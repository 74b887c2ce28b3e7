"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

pytest_plugins = ["pytester", "scopepath.testing"]


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small existing file."""
    target = tmp_path / "x" / "f.txt"
    target.parent.mkdir()
    target.write_text("content")
    return target


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A directory with nested files: d/{a, b/c}."""
    root = tmp_path / "x" / "d"
    (root / "b").mkdir(parents=True)
    (root / "a").write_text("a")
    (root / "b" / "c").write_text("c")
    return root
