"""Filesystem entry classification and removal.

This module provides the removal primitives scoped paths are built on.
"""

from scopepath.filesystem.models import EntryType, RemovalResult
from scopepath.filesystem.remover import classify_entry, discard_entry, remove_entry

__all__ = [
    "EntryType",
    "RemovalResult",
    "classify_entry",
    "discard_entry",
    "remove_entry",
]
