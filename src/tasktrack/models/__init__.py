"""Data models."""

from .config import StorageConfig, TasktrackConfig, ValidationConfig
from .enums import Priority, TaskStatus
from .filter import TaskFilter
from .statistics import TaskStatistics, TimeStatistics
from .task import Task

__all__ = [
    "Priority",
    "StorageConfig",
    "Task",
    "TaskFilter",
    "TaskStatistics",
    "TaskStatus",
    "TasktrackConfig",
    "TimeStatistics",
    "ValidationConfig",
]
