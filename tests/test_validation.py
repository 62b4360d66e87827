"""Tests for user-input validation helpers."""

from datetime import UTC, datetime, timedelta

import pytest

from tasktrack.models import Task
from tasktrack.repositories import InvalidTaskDataError
from tasktrack.services import ensure_valid, is_valid, parse_tags, validate_task

NOW = datetime(2026, 4, 1, tzinfo=UTC)


class TestValidateTask:
    """Tests for validate_task."""

    def test_valid_task(self):
        task = Task(title="Buy milk", due_date=NOW + timedelta(days=1))
        assert validate_task(task, now=NOW) == []
        assert is_valid(task, now=NOW)

    @pytest.mark.parametrize("title", ["", "   ", "\n\t"])
    def test_blank_title(self, title: str):
        assert validate_task(Task(title=title), now=NOW) == ["Task title cannot be empty"]

    def test_title_too_long(self):
        errors = validate_task(Task(title="x" * 101), now=NOW)
        assert errors == ["Task title cannot exceed 100 characters"]
        assert validate_task(Task(title="x" * 100), now=NOW) == []

    def test_description_too_long(self):
        errors = validate_task(Task(title="t", description="x" * 1001), now=NOW)
        assert errors == ["Task description cannot exceed 1000 characters"]

    def test_due_date_in_past(self):
        errors = validate_task(Task(title="t", due_date=NOW - timedelta(minutes=1)), now=NOW)
        assert errors == ["Due date cannot be in the past"]

    def test_custom_limits(self):
        errors = validate_task(Task(title="abcdef"), now=NOW, max_title_length=5)
        assert errors == ["Task title cannot exceed 5 characters"]

    def test_multiple_errors(self):
        task = Task(title="", description="x" * 2000, due_date=NOW - timedelta(days=1))
        assert len(validate_task(task, now=NOW)) == 3


class TestEnsureValid:
    """Tests for ensure_valid."""

    def test_returns_task(self):
        task = Task(title="ok")
        assert ensure_valid(task, now=NOW) is task

    def test_raises_with_all_messages(self):
        with pytest.raises(InvalidTaskDataError) as exc_info:
            ensure_valid(Task(title="", description="x" * 1001), now=NOW)

        assert "Task title cannot be empty" in exc_info.value.message
        assert "Task description cannot exceed" in exc_info.value.message
        assert str(exc_info.value).startswith("Invalid task data:")


class TestParseTags:
    """Tests for parse_tags."""

    def test_splits_and_strips(self):
        assert parse_tags(" work, home ,urgent") == frozenset({"work", "home", "urgent"})

    def test_drops_blanks_and_duplicates(self):
        assert parse_tags("a,,a, ,b") == frozenset({"a", "b"})

    def test_empty(self):
        assert parse_tags("") == frozenset()


def test_due_date_check_accepts_naive_now():
    task = Task(title="t", due_date=NOW - timedelta(minutes=1))
    assert validate_task(task, now=NOW.replace(tzinfo=None)) == ["Due date cannot be in the past"]
