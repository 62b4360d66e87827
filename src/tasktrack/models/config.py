"""Configuration models for tasktrack.yml."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_TASKS_FILENAME = "tasks.json"


class StorageConfig(BaseModel):
    """Where tasks are persisted."""

    backend: Literal["file", "memory"] = "file"
    path: Path | None = Field(
        default=None,
        description="Tasks file; relative paths resolve against the project root",
    )


class ValidationConfig(BaseModel):
    """Limits applied when tasks are entered."""

    max_title_length: int = Field(default=100, gt=0)
    max_description_length: int = Field(default=1000, gt=0)


class TasktrackConfig(BaseModel):
    """Root configuration model for tasktrack.yml."""

    version: int = 1
    storage: StorageConfig = Field(default_factory=StorageConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @classmethod
    def default(cls) -> "TasktrackConfig":
        """Return the configuration used when no file is present."""
        return cls()
