"""Colorful CLI output helpers."""

import sys

from ..models import Priority, Task, TaskStatus

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
TIMER = "\u23f1"  # ⏱

PRIORITY_COLORS = {
    Priority.LOW: GREEN,
    Priority.MEDIUM: BLUE,
    Priority.HIGH: YELLOW,
    Priority.URGENT: RED,
}

STATUS_MARKS = {
    TaskStatus.PENDING: "[ ]",
    TaskStatus.IN_PROGRESS: "[~]",
    TaskStatus.COMPLETED: "[x]",
    TaskStatus.CANCELLED: "[-]",
}


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross to stderr."""
    print(f"{_colorize(CROSS, RED)} {message}", file=sys.stderr)


def task_line(task: Task) -> str:
    """One-line summary: id, status, priority, title, due date, time, tags."""
    parts = [
        _colorize(task.short_id, DIM),
        STATUS_MARKS[task.status],
        _colorize(f"{task.priority.display_name:<6}", PRIORITY_COLORS[task.priority]),
        task.title,
    ]
    if task.due_date is not None:
        due = f"due {task.due_date:%Y-%m-%d}"
        parts.append(_colorize(due, RED) if task.is_overdue else due)
    if task.current_time_spent > 0 or task.is_timer_running:
        clock = task.formatted_time_spent
        parts.append(f"{TIMER} {clock}" if task.is_timer_running else clock)
    if task.tags:
        parts.append(" ".join(f"#{tag}" for tag in sorted(task.tags)))
    return "  ".join(parts)
