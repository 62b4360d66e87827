"""Unit tests for the Task model."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from pydantic import ValidationError

from tasktrack.models import Priority, Task, TaskStatus

T0 = datetime(2026, 3, 1, 9, 0, 0, tzinfo=UTC)


class TestTaskDefaults:
    """Tests for Task construction defaults."""

    def test_defaults(self):
        """A new task is pending, medium priority, with no time tracked."""
        task = Task(title="Buy milk")

        assert isinstance(task.id, UUID)
        assert task.description == ""
        assert task.priority == Priority.MEDIUM
        assert task.status == TaskStatus.PENDING
        assert task.due_date is None
        assert task.tags == frozenset()
        assert task.time_spent == 0
        assert task.timer_start_time is None
        assert task.created_at.tzinfo is not None

    def test_ids_are_unique(self):
        assert Task(title="a").id != Task(title="a").id

    def test_empty_title_allowed(self):
        """The model itself does not validate titles."""
        assert Task(title="").title == ""

    def test_tags_are_a_set(self):
        task = Task(title="t", tags=["a", "b", "a"])
        assert task.tags == frozenset({"a", "b"})

    def test_naive_datetimes_become_utc(self):
        task = Task(title="t", due_date=datetime(2026, 5, 1, 12, 0))
        assert task.due_date == datetime(2026, 5, 1, 12, 0, tzinfo=UTC)

    def test_task_is_immutable(self):
        task = Task(title="t")
        with pytest.raises(ValidationError):
            task.title = "changed"

    def test_snake_case_and_camel_case_names_accepted(self):
        a = Task(title="t", time_spent=5)
        b = Task.model_validate({"title": "t", "timeSpent": 5})
        assert a.time_spent == b.time_spent == 5


class TestPriority:
    """Tests for Priority ordering and parsing."""

    def test_ordering_is_numeric(self):
        assert Priority.LOW < Priority.MEDIUM < Priority.HIGH < Priority.URGENT
        assert [p.value for p in Priority] == [1, 2, 3, 4]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("low", Priority.LOW), ("HIGH", Priority.HIGH), ("4", Priority.URGENT)],
    )
    def test_parse(self, raw: str, expected: Priority):
        assert Priority.parse(raw) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown priority"):
            Priority.parse("critical")

    def test_display_names(self):
        assert Priority.URGENT.display_name == "Urgent"
        assert TaskStatus.IN_PROGRESS.display_name == "In Progress"


class TestDerivedState:
    """Tests for computed properties."""

    def test_is_completed(self):
        assert Task(title="t", status=TaskStatus.COMPLETED).is_completed
        assert not Task(title="t", status=TaskStatus.CANCELLED).is_completed

    def test_is_overdue_past_due(self):
        past = datetime.now(UTC) - timedelta(days=1)
        assert Task(title="t", due_date=past).is_overdue

    def test_completed_task_never_overdue(self):
        past = datetime.now(UTC) - timedelta(days=1)
        assert not Task(title="t", due_date=past, status=TaskStatus.COMPLETED).is_overdue

    def test_no_due_date_not_overdue(self):
        task = Task(title="t")
        assert not task.is_overdue
        assert task.days_until_due is None

    def test_future_due_not_overdue(self):
        future = datetime.now(UTC) + timedelta(days=3, hours=1)
        task = Task(title="t", due_date=future)
        assert not task.is_overdue
        assert task.days_until_due == 3

    def test_due_within(self):
        task = Task(title="t", due_date=T0 + timedelta(days=2))
        assert task.due_within(3, now=T0)
        assert not task.due_within(1, now=T0)
        assert not task.due_within(3, now=T0 + timedelta(days=3))


class TestTimer:
    """Tests for start/stop/reset time tracking."""

    def test_start_sets_start_time(self):
        task = Task(title="t").start_timer(now=T0)
        assert task.is_timer_running
        assert task.timer_start_time == T0
        assert task.updated_at == T0

    def test_start_is_idempotent(self):
        """Starting an already running timer keeps the original start."""
        started = Task(title="t").start_timer(now=T0)
        again = started.start_timer(now=T0 + timedelta(minutes=5))
        assert again is started
        assert again.timer_start_time == T0

    def test_stop_accumulates_elapsed(self):
        task = Task(title="t", time_spent=30).start_timer(now=T0)
        stopped = task.stop_timer(now=T0 + timedelta(seconds=90))

        assert stopped.time_spent == pytest.approx(120)
        assert stopped.timer_start_time is None
        assert not stopped.is_timer_running

    def test_stop_with_real_clock(self):
        task = Task(title="t").start_timer()
        stopped = task.stop_timer()
        assert 0 <= stopped.time_spent < 5
        assert stopped.timer_start_time is None

    def test_stop_when_not_running_is_noop(self):
        task = Task(title="t", time_spent=10)
        assert task.stop_timer(now=T0) is task

    def test_reset_discards_everything(self):
        running = Task(title="t", time_spent=500).start_timer(now=T0)
        reset = running.reset_timer(now=T0 + timedelta(hours=1))

        assert reset.time_spent == 0
        assert reset.timer_start_time is None
        assert reset.updated_at == T0 + timedelta(hours=1)

    def test_operations_keep_identity(self):
        task = Task(title="t")
        assert task.start_timer().stop_timer().reset_timer().id == task.id

    def test_time_spent_at_includes_open_interval(self):
        task = Task(title="t", time_spent=10).start_timer(now=T0)
        assert task.time_spent_at(T0 + timedelta(seconds=5)) == pytest.approx(15)
        assert task.current_time_spent >= 10

    def test_with_status(self):
        task = Task(title="t", time_spent=42)
        done = task.with_status(TaskStatus.COMPLETED, now=T0)
        assert done.status == TaskStatus.COMPLETED
        assert done.time_spent == 42
        assert done.updated_at == T0
        assert done.created_at == task.created_at


class TestFormattedTimeSpent:
    """Tests for the elapsed-time display."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0:00"),
            (59.9, "0:59"),
            (65, "1:05"),
            (3599, "59:59"),
            (3600, "1:00:00"),
            (3 * 3600 + 7 * 60 + 9, "3:07:09"),
        ],
    )
    def test_format(self, seconds: float, expected: str):
        assert Task(title="t", time_spent=seconds).formatted_time_spent == expected


class TestSerialization:
    """Tests for JSON field names and round-tripping."""

    def test_json_uses_camel_case_keys(self):
        task = Task(title="t", due_date=T0, tags={"b", "a"}, priority=Priority.HIGH)
        data = task.model_dump(mode="json", by_alias=True)

        assert set(data) == {
            "id",
            "title",
            "description",
            "priority",
            "status",
            "dueDate",
            "tags",
            "createdAt",
            "updatedAt",
            "timeSpent",
            "timerStartTime",
        }
        assert data["priority"] == 3
        assert data["status"] == "pending"
        assert data["tags"] == ["a", "b"]
        assert data["id"] == str(task.id)

    def test_round_trip(self):
        task = Task(
            title="Write report",
            description="Q3 numbers",
            priority=Priority.URGENT,
            status=TaskStatus.IN_PROGRESS,
            due_date=T0,
            tags={"work", "q3"},
            time_spent=1234.5678,
        ).start_timer(now=T0)

        restored = Task.model_validate_json(task.model_dump_json(by_alias=True))

        assert restored == task


class TestNaiveNow:
    """Naive ``now`` values are treated as UTC by every operation."""

    NAIVE = datetime(2026, 1, 1, 12, 0)
    AWARE = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_start_timer(self):
        task = Task(title="t").start_timer(now=self.NAIVE)
        assert task.timer_start_time == self.AWARE
        assert task.timer_start_time.tzinfo is not None
        assert task.updated_at.tzinfo is not None
        assert task.current_time_spent > 0

    def test_stop_timer(self):
        task = Task(title="t").start_timer(now=self.AWARE)
        stopped = task.stop_timer(now=self.NAIVE + timedelta(seconds=30))
        assert stopped.time_spent == pytest.approx(30)
        assert stopped.updated_at.tzinfo is not None

    def test_reset_timer(self):
        assert Task(title="t").reset_timer(now=self.NAIVE).updated_at == self.AWARE

    def test_with_status(self):
        done = Task(title="t").with_status(TaskStatus.COMPLETED, now=self.NAIVE)
        assert done.updated_at.tzinfo is not None

    def test_time_spent_at_and_due_within(self):
        task = Task(title="t", due_date=self.AWARE + timedelta(days=1)).start_timer(now=self.AWARE)
        assert task.time_spent_at(self.NAIVE + timedelta(seconds=5)) == pytest.approx(5)
        assert task.due_within(2, now=self.NAIVE)

    def test_round_trip_after_naive_start(self):
        task = Task(title="t").start_timer(now=self.NAIVE)
        restored = Task.model_validate_json(task.model_dump_json(by_alias=True))
        assert restored == task
