"""Configuration."""

from .settings import Settings, default_tasks_file

__all__ = ["Settings", "default_tasks_file"]
