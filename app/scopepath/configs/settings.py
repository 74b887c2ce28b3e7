"""Temporary path settings.

This module provides the configuration model used when scopepath
generates fresh temporary paths (``AutoDeletePath.temp`` and friends).
"""

import tempfile
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PREFIX = "scopepath"


class TempPathSettings(BaseModel):
    """Settings for generated temporary paths.

    Attributes:
        directory: Directory new temporary paths are placed in.
            If None, uses the platform temp directory.
        prefix: File name prefix for generated paths.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: Annotated[
        Path | None,
        Field(description="Parent directory (None = platform temp directory)"),
    ] = None
    prefix: Annotated[
        str,
        Field(min_length=1, description="File name prefix for generated paths"),
    ] = DEFAULT_PREFIX

    @field_validator("prefix")
    @classmethod
    def _prefix_is_single_component(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"prefix must be a plain file name, got {value!r}")
        return value

    @property
    def effective_directory(self) -> Path:
        """Get the directory temporary paths are created in.

        Returns:
            The configured directory, or the platform temp directory.
        """
        if self.directory is not None:
            return self.directory
        return Path(tempfile.gettempdir())
