"""Enums for task status and priority."""

from enum import Enum, IntEnum


class Priority(IntEnum):
    """Priority levels for tasks, ordered by urgency."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4

    @property
    def display_name(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, value: str) -> "Priority":
        """Parse a priority from its name ("high") or number ("3")."""
        value = value.strip()
        if value.isdigit():
            return cls(int(value))
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown priority: {value}") from None


class TaskStatus(str, Enum):
    """Lifecycle status of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()
