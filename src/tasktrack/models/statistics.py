"""Aggregate values computed from a task snapshot."""

from dataclasses import dataclass

from ..utils import format_duration_long, format_duration_short


@dataclass(frozen=True)
class TaskStatistics:
    """Counts by status plus completion and overdue rates."""

    total: int
    completed: int
    pending: int
    in_progress: int
    overdue: int

    @property
    def completion_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total

    @property
    def overdue_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.overdue / self.total


@dataclass(frozen=True)
class TimeStatistics:
    """Tracked time across tasks, in seconds."""

    total_time_spent: float
    average_time_per_task: float  # Over tasks with nonzero time only
    tasks_with_time: int
    currently_running: int

    @property
    def formatted_total_time(self) -> str:
        return format_duration_long(self.total_time_spent)

    @property
    def formatted_average_time(self) -> str:
        return format_duration_short(self.average_time_per_task)
