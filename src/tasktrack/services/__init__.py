"""Service layer for business logic."""

from .analytics import (
    average_completion_time,
    priority_distribution,
    productivity_score,
    status_distribution,
)
from .config_service import ConfigService
from .sorting import TaskSortOrder, sort_tasks
from .task_manager import ManagerState, TaskManager
from .validation import ensure_valid, is_valid, parse_tags, validate_task

__all__ = [
    "ConfigService",
    "ManagerState",
    "TaskManager",
    "TaskSortOrder",
    "average_completion_time",
    "ensure_valid",
    "is_valid",
    "parse_tags",
    "priority_distribution",
    "productivity_score",
    "sort_tasks",
    "status_distribution",
    "validate_task",
]
