"""Configuration models for scopepath."""

from scopepath.configs.settings import DEFAULT_PREFIX, TempPathSettings

__all__ = [
    "DEFAULT_PREFIX",
    "TempPathSettings",
]
