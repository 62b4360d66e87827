"""Aggregates over arbitrary task lists."""

from datetime import datetime

from ..models import Priority, Task, TaskStatus
from ..utils import resolve_now

OVERDUE_PENALTY = 0.1


def priority_distribution(tasks: list[Task]) -> dict[Priority, int]:
    """Count tasks per priority; every priority is present."""
    return {priority: sum(1 for t in tasks if t.priority == priority) for priority in Priority}


def status_distribution(tasks: list[Task]) -> dict[TaskStatus, int]:
    """Count tasks per status; every status is present."""
    return {status: sum(1 for t in tasks if t.status == status) for status in TaskStatus}


def average_completion_time(tasks: list[Task]) -> float | None:
    """Mean seconds from creation to last update over completed tasks."""
    completed = [t for t in tasks if t.is_completed]
    if not completed:
        return None
    total = sum((t.updated_at - t.created_at).total_seconds() for t in completed)
    return total / len(completed)


def productivity_score(tasks: list[Task], now: datetime | None = None) -> float:
    """Completion ratio minus a fixed penalty per overdue task, floored at 0."""
    if not tasks:
        return 0.0
    now = resolve_now(now)
    completed = sum(1 for t in tasks if t.is_completed)
    overdue = sum(
        1 for t in tasks if t.due_date is not None and t.due_date < now and not t.is_completed
    )
    return max(0.0, completed / len(tasks) - overdue * OVERDUE_PENALTY)
