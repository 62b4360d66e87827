"""JSON file repository for task storage."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from ..models import Task, TaskFilter
from .errors import DuplicateTaskError, StorageError, TaskNotFoundError

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class JsonFileTaskRepository:
    """
    Repository backed by a single JSON document.

    The file holds an array of task objects with camelCase keys. Every
    change reads the whole document, applies the change in memory and
    writes the whole document back. Writes go through a temporary file and
    ``os.replace`` so the file is never left half-written, but there is no
    locking: concurrent writers lose updates.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Location of the JSON document (e.g., ~/Documents/tasks.json)
        """
        self.path = path

    def ensure_directory(self) -> None:
        """Create the parent directory if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    # --- Task Operations ---

    def load_tasks(self) -> list[Task]:
        """Read all tasks. A missing or unreadable document counts as empty."""
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not data.strip():
            return []

        try:
            tasks = _TASK_LIST.validate_json(data)
        except ValidationError as e:
            logger.warning(
                "Ignoring unreadable tasks file %s (%d errors)", self.path, e.error_count()
            )
            return []

        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save_task(self, task: Task) -> None:
        tasks = self.load_tasks()
        if any(existing.id == task.id for existing in tasks):
            raise DuplicateTaskError(task.id)
        tasks.append(task)
        self._write(tasks)

    def update_task(self, task: Task) -> None:
        tasks = self.load_tasks()
        for i, existing in enumerate(tasks):
            if existing.id == task.id:
                tasks[i] = task
                self._write(tasks)
                return
        raise TaskNotFoundError(task.id)

    def delete_task(self, task_id: UUID) -> None:
        tasks = self.load_tasks()
        remaining = [task for task in tasks if task.id != task_id]
        if len(remaining) != len(tasks):
            self._write(remaining)

    def search_tasks(self, task_filter: TaskFilter) -> list[Task]:
        return task_filter.apply(self.load_tasks())

    # --- Private Methods ---

    def _write(self, tasks: list[Task]) -> None:
        """Serialize ``tasks`` and atomically replace the document."""
        payload = _TASK_LIST.dump_json(tasks, by_alias=True, indent=2)
        tmp_path: str | None = None
        try:
            self.ensure_directory()
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        logger.debug("Wrote %d tasks to %s", len(tasks), self.path)
