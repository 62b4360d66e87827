"""Errors raised by task repositories."""

from uuid import UUID


class TaskRepositoryError(Exception):
    """Base class for repository failures."""


class TaskNotFoundError(TaskRepositoryError):
    """No task with the given ID exists."""

    def __init__(self, task_id: UUID) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")


class DuplicateTaskError(TaskRepositoryError):
    """A task with the given ID is already stored."""

    def __init__(self, task_id: UUID) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} already exists")


class InvalidTaskDataError(TaskRepositoryError):
    """Task fields failed validation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid task data: {message}")


class StorageError(TaskRepositoryError):
    """The storage medium could not be read or written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Storage error: {message}")
