"""Sort orders for task lists."""

from datetime import datetime
from enum import Enum

from ..models import Task
from ..utils import resolve_now


class TaskSortOrder(str, Enum):
    """Orders offered when listing tasks."""

    TITLE = "title"
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TIME_SPENT = "time_spent"

    @property
    def display_name(self) -> str:
        return {
            TaskSortOrder.TITLE: "Title",
            TaskSortOrder.PRIORITY: "Priority",
            TaskSortOrder.DUE_DATE: "Due Date",
            TaskSortOrder.CREATED_AT: "Created",
            TaskSortOrder.UPDATED_AT: "Updated",
            TaskSortOrder.TIME_SPENT: "Time Spent",
        }[self]


def sort_tasks(
    tasks: list[Task], order: TaskSortOrder, now: datetime | None = None
) -> list[Task]:
    """
    Return ``tasks`` sorted by ``order``.

    Title sorts A-Z ignoring case and due date sorts soonest first with
    undated tasks last. Every other order puts the largest value first
    (highest priority, newest, most time).
    """
    if order is TaskSortOrder.TITLE:
        return sorted(tasks, key=lambda t: t.title.casefold())
    if order is TaskSortOrder.PRIORITY:
        return sorted(tasks, key=lambda t: t.priority, reverse=True)
    if order is TaskSortOrder.DUE_DATE:
        dated = sorted((t for t in tasks if t.due_date is not None), key=lambda t: t.due_date)
        return dated + [t for t in tasks if t.due_date is None]
    if order is TaskSortOrder.CREATED_AT:
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)
    if order is TaskSortOrder.UPDATED_AT:
        return sorted(tasks, key=lambda t: t.updated_at, reverse=True)

    now = resolve_now(now)
    return sorted(tasks, key=lambda t: t.time_spent_at(now), reverse=True)
