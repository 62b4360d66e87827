"""Task domain model."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from ..utils import ensure_utc, format_clock, now_utc, resolve_now
from .enums import Priority, TaskStatus


class Task(BaseModel):
    """A single task with optional time tracking.

    Tasks are immutable. Every change produces a new Task carrying the same
    ``id``, and ``updated_at`` is refreshed by the operations below.

    Time tracking keeps closed intervals in ``time_spent`` (seconds) and the
    start of the open interval, if any, in ``timer_start_time``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: UUID = Field(default_factory=uuid4)
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime | None = None
    tags: frozenset[str] = Field(default_factory=frozenset)
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)
    time_spent: float = 0.0
    timer_start_time: datetime | None = None

    @field_validator("due_date", "created_at", "updated_at", "timer_start_time")
    @classmethod
    def _normalize_timezone(cls, value: datetime | None) -> datetime | None:
        """Treat naive datetimes as UTC."""
        if value is None:
            return None
        return ensure_utc(value)

    @field_serializer("tags")
    def _serialize_tags(self, tags: frozenset[str]) -> list[str]:
        return sorted(tags)

    # --- Derived state ---

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @property
    def is_overdue(self) -> bool:
        """True if the task has a past due date and is not completed."""
        if self.due_date is None:
            return False
        return not self.is_completed and self.due_date < now_utc()

    @property
    def days_until_due(self) -> int | None:
        """Whole days until the due date (negative once past), or None."""
        if self.due_date is None:
            return None
        return int((self.due_date - now_utc()).total_seconds() / 86400)

    @property
    def is_timer_running(self) -> bool:
        return self.timer_start_time is not None

    def time_spent_at(self, now: datetime) -> float:
        """Accumulated seconds including the open interval up to ``now``."""
        if self.timer_start_time is None:
            return self.time_spent
        return self.time_spent + (ensure_utc(now) - self.timer_start_time).total_seconds()

    @property
    def current_time_spent(self) -> float:
        return self.time_spent_at(now_utc())

    @property
    def formatted_time_spent(self) -> str:
        """Elapsed time as H:MM:SS, or M:SS under an hour."""
        return format_clock(self.current_time_spent)

    @property
    def short_id(self) -> str:
        """First block of the UUID, for display."""
        return str(self.id).split("-")[0]

    # --- Operations (each returns a new Task) ---

    def start_timer(self, now: datetime | None = None) -> "Task":
        """Open a timer interval. No-op if one is already open."""
        if self.is_timer_running:
            return self
        now = resolve_now(now)
        return self.model_copy(update={"timer_start_time": now, "updated_at": now})

    def stop_timer(self, now: datetime | None = None) -> "Task":
        """Close the open interval into ``time_spent``. No-op if not running."""
        if self.timer_start_time is None:
            return self
        now = resolve_now(now)
        return self.model_copy(
            update={
                "time_spent": self.time_spent_at(now),
                "timer_start_time": None,
                "updated_at": now,
            }
        )

    def reset_timer(self, now: datetime | None = None) -> "Task":
        """Zero the tracked time. An open interval is discarded, not stopped."""
        now = resolve_now(now)
        return self.model_copy(
            update={"time_spent": 0.0, "timer_start_time": None, "updated_at": now}
        )

    def with_status(self, status: TaskStatus, now: datetime | None = None) -> "Task":
        """Copy with a new status."""
        return self.model_copy(update={"status": status, "updated_at": resolve_now(now)})

    def due_within(self, days: int, now: datetime | None = None) -> bool:
        """True if not completed and due between now and now + days."""
        if self.due_date is None or self.is_completed:
            return False
        now = resolve_now(now)
        return now <= self.due_date <= now + timedelta(days=days)
