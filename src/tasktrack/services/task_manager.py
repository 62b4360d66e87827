"""Service mediating between callers and a task repository."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ..models import Priority, Task, TaskFilter, TaskStatistics, TaskStatus, TimeStatistics
from ..repositories import TaskRepositoryError, TaskRepositoryProtocol
from ..utils import now_utc, resolve_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagerState:
    """Immutable view of the manager's observable state."""

    tasks: tuple[Task, ...]
    is_loading: bool
    error: TaskRepositoryError | None


StateListener = Callable[[ManagerState], None]


class TaskManager:
    """
    Holds the last-loaded task snapshot and proxies every change to storage.

    Each mutation goes to the repository and then reloads the full list, so
    ``tasks`` always reflects what storage holds (``search_tasks`` is the
    exception: it replaces the snapshot with the filtered result).

    Repository failures are never raised to the caller. The most recent one
    is kept in ``error`` until the next load or ``clear_error()``.

    Operations are serialized with a re-entrant lock, so calls from several
    threads run one after another rather than interleaving.
    """

    def __init__(self, repository: TaskRepositoryProtocol) -> None:
        self.repository = repository
        self._tasks: list[Task] = []
        self._is_loading = False
        self._error: TaskRepositoryError | None = None
        self._listeners: list[StateListener] = []
        self._lock = threading.RLock()

    # --- Observable state ---

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> TaskRepositoryError | None:
        return self._error

    @property
    def state(self) -> ManagerState:
        return ManagerState(tuple(self._tasks), self._is_loading, self._error)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after each state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_error(self) -> None:
        if self._error is not None:
            self._error = None
            self._notify()

    # --- Repository operations ---

    def load_tasks(self) -> bool:
        """Replace the snapshot with the repository's full collection."""
        with self._lock:
            self._is_loading = True
            self._error = None
            self._notify()
            try:
                self._tasks = self.repository.load_tasks()
                ok = True
            except TaskRepositoryError as e:
                self._record_error("load tasks", e)
                ok = False
            finally:
                self._is_loading = False
            self._notify()
            return ok

    def add_task(self, task: Task) -> bool:
        logger.info("Adding task: %s (%s)", task.id, task.title)
        return self._mutate("add task", lambda: self.repository.save_task(task))

    def update_task(self, task: Task) -> bool:
        logger.debug("Updating task: %s", task.id)
        return self._mutate("update task", lambda: self.repository.update_task(task))

    def delete_task(self, task_id: UUID) -> bool:
        logger.info("Deleting task: %s", task_id)
        return self._mutate("delete task", lambda: self.repository.delete_task(task_id))

    def mark_task_as_completed(self, task_id: UUID) -> bool:
        """Set the task's status to completed. Unknown IDs are ignored."""
        with self._lock:
            task = self.get_task(task_id)
            if task is None:
                logger.debug("mark_task_as_completed: task not found: %s", task_id)
                return False
            logger.info("Completing task: %s", task_id)
            return self.update_task(task.with_status(TaskStatus.COMPLETED))

    def search_tasks(self, task_filter: TaskFilter) -> bool:
        """Replace the snapshot with the tasks matching ``task_filter``."""
        with self._lock:
            try:
                self._tasks = self.repository.search_tasks(task_filter)
            except TaskRepositoryError as e:
                self._record_error("search tasks", e)
                self._notify()
                return False
            self._notify()
            return True

    # --- Time tracking ---

    def start_timer(self, task_id: UUID) -> bool:
        """Start the task's timer after stopping every other running timer."""
        with self._lock:
            if self.get_task(task_id) is None:
                logger.debug("start_timer: task not found: %s", task_id)
                return False
            self.stop_all_timers()
            # Re-read: the stop pass may have replaced this task
            task = self.get_task(task_id)
            if task is None:
                return False
            logger.info("Starting timer: %s", task_id)
            return self.update_task(task.start_timer())

    def stop_timer(self, task_id: UUID) -> bool:
        with self._lock:
            task = self.get_task(task_id)
            if task is None:
                logger.debug("stop_timer: task not found: %s", task_id)
                return False
            logger.info("Stopping timer: %s", task_id)
            return self.update_task(task.stop_timer())

    def reset_timer(self, task_id: UUID) -> bool:
        with self._lock:
            task = self.get_task(task_id)
            if task is None:
                logger.debug("reset_timer: task not found: %s", task_id)
                return False
            logger.info("Resetting timer: %s", task_id)
            return self.update_task(task.reset_timer())

    def stop_all_timers(self) -> bool:
        with self._lock:
            now = now_utc()
            ok = True
            for task in [t for t in self._tasks if t.is_timer_running]:
                ok = self.update_task(task.stop_timer(now)) and ok
            return ok

    # --- Snapshot queries ---

    def get_task(self, task_id: UUID) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def get_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._tasks if t.status == status]

    def get_tasks_by_priority(self, priority: Priority) -> list[Task]:
        return [t for t in self._tasks if t.priority == priority]

    def get_overdue_tasks(self, now: datetime | None = None) -> list[Task]:
        """Tasks with a due date before ``now`` that are not completed."""
        now = resolve_now(now)
        return [
            t
            for t in self._tasks
            if t.due_date is not None and t.due_date < now and t.status != TaskStatus.COMPLETED
        ]

    def get_upcoming_tasks(self, within_days: int, now: datetime | None = None) -> list[Task]:
        """Incomplete tasks due between now and ``within_days`` from now."""
        now = resolve_now(now)
        return [t for t in self._tasks if t.due_within(within_days, now)]

    def get_task_statistics(self, now: datetime | None = None) -> TaskStatistics:
        return TaskStatistics(
            total=len(self._tasks),
            completed=sum(1 for t in self._tasks if t.is_completed),
            pending=len(self.get_tasks_by_status(TaskStatus.PENDING)),
            in_progress=len(self.get_tasks_by_status(TaskStatus.IN_PROGRESS)),
            overdue=len(self.get_overdue_tasks(now)),
        )

    def get_time_statistics(self, now: datetime | None = None) -> TimeStatistics:
        now = resolve_now(now)
        spent = [t.time_spent_at(now) for t in self._tasks]
        with_time = [s for s in spent if s > 0]
        total = sum(spent)
        return TimeStatistics(
            total_time_spent=total,
            average_time_per_task=total / len(with_time) if with_time else 0.0,
            tasks_with_time=len(with_time),
            currently_running=sum(1 for t in self._tasks if t.is_timer_running),
        )

    # --- Private Methods ---

    def _mutate(self, action: str, operation: Callable[[], None]) -> bool:
        """Run a repository write, then reload. Failures land in ``error``."""
        with self._lock:
            try:
                operation()
            except TaskRepositoryError as e:
                self._record_error(action, e)
                self._notify()
                return False
            return self.load_tasks()

    def _record_error(self, action: str, error: TaskRepositoryError) -> None:
        logger.warning("Failed to %s: %s", action, error)
        self._error = error

    def _notify(self) -> None:
        state = self.state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
