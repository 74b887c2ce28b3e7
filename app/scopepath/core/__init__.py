"""Core scoped path handle and temporary path naming."""

from scopepath.core.path import AutoDeletePath
from scopepath.core.temp import create_temp_path

__all__ = [
    "AutoDeletePath",
    "create_temp_path",
]
