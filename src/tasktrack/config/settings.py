"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models.config import DEFAULT_TASKS_FILENAME


def default_tasks_file() -> Path:
    """The tasks file used when neither settings nor tasktrack.yml name one."""
    return Path.home() / "Documents" / DEFAULT_TASKS_FILENAME


class Settings(BaseSettings):
    """Application settings, read from TASKTRACK_* environment variables."""

    project_root: Path = Field(
        default=Path(),
        description="Path to project root containing tasktrack.yml",
    )

    tasks_file: Path | None = Field(
        default=None,
        description="JSON tasks file; overrides tasktrack.yml when set",
    )

    storage: Literal["file", "memory"] | None = Field(
        default=None,
        description="Storage backend; overrides tasktrack.yml when set",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKTRACK_",
    }
