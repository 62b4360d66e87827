"""Repository layer for data access."""

from .errors import (
    DuplicateTaskError,
    InvalidTaskDataError,
    StorageError,
    TaskNotFoundError,
    TaskRepositoryError,
)
from .json_file import JsonFileTaskRepository
from .memory import InMemoryTaskRepository
from .protocol import TaskRepositoryProtocol

__all__ = [
    "DuplicateTaskError",
    "InMemoryTaskRepository",
    "InvalidTaskDataError",
    "JsonFileTaskRepository",
    "StorageError",
    "TaskNotFoundError",
    "TaskRepositoryError",
    "TaskRepositoryProtocol",
]
