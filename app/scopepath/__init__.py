"""scopepath - filesystem paths that delete themselves at end of scope.

Wrap a path in an AutoDeletePath and the file or directory at that path
is removed when the handle goes out of scope, unless you hold() it.
"""

from scopepath.configs.settings import TempPathSettings
from scopepath.core.path import AutoDeletePath
from scopepath.errors import DeletionError, MaterializeError, ScopePathError
from scopepath.filesystem.models import EntryType, RemovalResult

__version__ = "0.1.0"

__all__ = [
    "AutoDeletePath",
    "DeletionError",
    "EntryType",
    "MaterializeError",
    "RemovalResult",
    "ScopePathError",
    "TempPathSettings",
    "__version__",
]
