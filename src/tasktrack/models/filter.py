"""Predicate for narrowing a task list."""

from dataclasses import dataclass, field

from .enums import Priority, TaskStatus
from .task import Task


@dataclass(frozen=True)
class TaskFilter:
    """A conjunction of optional task predicates.

    Unset predicates always pass, so ``TaskFilter()`` accepts every task.
    """

    status: TaskStatus | None = None
    priority: Priority | None = None
    search_text: str = ""  # Case-insensitive, title or description
    tags: frozenset[str] = field(default_factory=frozenset)  # All must be present
    show_completed: bool = True

    @property
    def is_active(self) -> bool:
        """True if any predicate would reject some task."""
        return bool(
            self.status is not None
            or self.priority is not None
            or self.search_text
            or self.tags
            or not self.show_completed
        )

    def matches(self, task: Task) -> bool:
        """Check if a task passes every configured predicate."""
        if self.status is not None and task.status != self.status:
            return False

        if self.priority is not None and task.priority != self.priority:
            return False

        if self.search_text:
            needle = self.search_text.lower()
            if needle not in task.title.lower() and needle not in task.description.lower():
                return False

        if self.tags and not self.tags <= task.tags:
            return False

        if not self.show_completed and task.is_completed:
            return False

        return True

    def apply(self, tasks: list[Task]) -> list[Task]:
        """Return the tasks that match, preserving order."""
        return [task for task in tasks if self.matches(task)]
