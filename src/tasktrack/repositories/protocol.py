"""Repository protocol for task storage backends."""

from typing import Protocol
from uuid import UUID

from ..models import Task, TaskFilter


class TaskRepositoryProtocol(Protocol):
    """Interface for task storage backends.

    Implementations:
    - In-memory (process lifetime)
    - JSON file (whole-document rewrite on every change)

    All failures are raised as ``TaskRepositoryError`` subclasses.
    """

    def load_tasks(self) -> list[Task]:
        """Load all tasks.

        Returns:
            The full collection in insertion order.
        """
        ...

    def save_task(self, task: Task) -> None:
        """Insert a new task.

        Args:
            task: The task to store.

        Raises:
            DuplicateTaskError: A task with the same ID is already stored.
        """
        ...

    def update_task(self, task: Task) -> None:
        """Replace the stored task that has the same ID.

        Args:
            task: The new value.

        Raises:
            TaskNotFoundError: No task with that ID exists. Storage is unchanged.
        """
        ...

    def delete_task(self, task_id: UUID) -> None:
        """Delete a task by ID.

        Args:
            task_id: The task identifier to delete.

        Note:
            Does not raise an error if the task doesn't exist.
        """
        ...

    def search_tasks(self, task_filter: TaskFilter) -> list[Task]:
        """Return the stored tasks matching ``task_filter``."""
        ...
