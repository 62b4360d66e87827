"""Checks applied to user-entered task fields."""

from datetime import datetime

from ..models import Task
from ..repositories import InvalidTaskDataError
from ..utils import resolve_now

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000


def validate_task(
    task: Task,
    now: datetime | None = None,
    max_title_length: int = MAX_TITLE_LENGTH,
    max_description_length: int = MAX_DESCRIPTION_LENGTH,
) -> list[str]:
    """Return a message for every problem found; empty means valid.

    The model itself accepts any values, so this runs only where tasks are
    entered (the CLI), never in repositories.
    """
    errors: list[str] = []

    if not task.title.strip():
        errors.append("Task title cannot be empty")

    if len(task.title) > max_title_length:
        errors.append(f"Task title cannot exceed {max_title_length} characters")

    if len(task.description) > max_description_length:
        errors.append(f"Task description cannot exceed {max_description_length} characters")

    if task.due_date is not None and task.due_date < resolve_now(now):
        errors.append("Due date cannot be in the past")

    return errors


def is_valid(task: Task, now: datetime | None = None) -> bool:
    return not validate_task(task, now)


def ensure_valid(task: Task, now: datetime | None = None, **limits: int) -> Task:
    """Return ``task`` unchanged, or raise InvalidTaskDataError listing the problems."""
    errors = validate_task(task, now, **limits)
    if errors:
        raise InvalidTaskDataError("; ".join(errors))
    return task


def parse_tags(text: str) -> frozenset[str]:
    """Split a comma-separated tag string, dropping blanks."""
    return frozenset(tag.strip() for tag in text.split(",") if tag.strip())
