"""In-memory repository, useful for tests and throwaway sessions."""

import logging
from uuid import UUID

from ..models import Task, TaskFilter
from .errors import DuplicateTaskError, TaskNotFoundError

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """Keeps tasks in an ordered list for the lifetime of the process."""

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def load_tasks(self) -> list[Task]:
        return list(self._tasks)

    def save_task(self, task: Task) -> None:
        if any(existing.id == task.id for existing in self._tasks):
            raise DuplicateTaskError(task.id)
        self._tasks.append(task)
        logger.debug("Stored task %s in memory", task.id)

    def update_task(self, task: Task) -> None:
        for i, existing in enumerate(self._tasks):
            if existing.id == task.id:
                self._tasks[i] = task
                return
        raise TaskNotFoundError(task.id)

    def delete_task(self, task_id: UUID) -> None:
        self._tasks = [task for task in self._tasks if task.id != task_id]

    def search_tasks(self, task_filter: TaskFilter) -> list[Task]:
        return task_filter.apply(self._tasks)
