"""Unique temporary path naming.

Generated names have the form ``<prefix>-<pid>-<n>`` where ``n`` comes
from a process-wide counter starting at 1. Only a path is produced;
nothing is created on disk.
"""

import itertools
import os
import threading
from pathlib import Path

from scopepath.configs.settings import TempPathSettings

_counter = itertools.count(1)
_counter_lock = threading.Lock()


def _next_index() -> int:
    with _counter_lock:
        return next(_counter)


def create_temp_path(settings: TempPathSettings | None = None) -> Path:
    """Build a fresh path inside the configured temp directory.

    Args:
        settings: Naming settings. If None, uses the defaults.

    Returns:
        Path that no earlier call in this process has returned.
    """
    settings = settings or TempPathSettings()
    name = f"{settings.prefix}-{os.getpid()}-{_next_index()}"
    return settings.effective_directory / name
