"""Implementations of the tasktrack subcommands.

Each ``run_*`` function takes a loaded TaskManager plus the parsed
arguments and returns a process exit code.
"""

from __future__ import annotations

import argparse
import logging
from uuid import UUID

from ..models import Task, TaskFilter, TaskStatus, ValidationConfig
from ..repositories import InvalidTaskDataError
from ..services import (
    TaskManager,
    TaskSortOrder,
    ensure_valid,
    parse_tags,
    priority_distribution,
    productivity_score,
    sort_tasks,
    status_distribution,
)
from ..utils import from_iso
from . import output

logger = logging.getLogger(__name__)


def resolve_task_id(manager: TaskManager, ref: str) -> UUID | None:
    """Find the task whose UUID starts with ``ref``, reporting misses."""
    prefix = ref.strip().lower()
    matches = [t for t in manager.tasks if str(t.id).startswith(prefix)]
    if len(matches) == 1:
        return matches[0].id
    if not matches:
        output.error(f"No task matches '{ref}'")
    else:
        output.error(f"'{ref}' matches {len(matches)} tasks, use a longer prefix")
    return None


def _report(manager: TaskManager) -> int:
    """Print the manager's pending error, if any, and pick the exit code."""
    if manager.error is not None:
        output.error(str(manager.error))
        return 1
    return 0


def run_list(manager: TaskManager, args: argparse.Namespace) -> int:
    task_filter = TaskFilter(
        status=TaskStatus(args.status) if args.status else None,
        priority=args.priority,
        search_text=args.search or "",
        tags=frozenset(args.tag or []),
        show_completed=not args.hide_completed,
    )
    if task_filter.is_active:
        manager.search_tasks(task_filter)
        if manager.error is not None:
            return _report(manager)

    tasks = sort_tasks(manager.tasks, TaskSortOrder(args.sort))
    if not tasks:
        output.info("No tasks")
        return 0

    for task in tasks:
        print(output.task_line(task))
    return 0


def run_add(
    manager: TaskManager, args: argparse.Namespace, limits: ValidationConfig
) -> int:
    try:
        task = Task(
            title=args.title.strip(),
            description=(args.description or "").strip(),
            priority=args.priority,
            due_date=from_iso(args.due) if args.due else None,
            tags=parse_tags(args.tags or ""),
        )
        ensure_valid(
            task,
            max_title_length=limits.max_title_length,
            max_description_length=limits.max_description_length,
        )
    except InvalidTaskDataError as e:
        for message in e.message.split("; "):
            output.error(message)
        return 1
    except ValueError as e:
        output.error(str(e))
        return 1

    if not manager.add_task(task):
        return _report(manager)
    output.success(f"Added {task.short_id}: {task.title}")
    return 0


def run_task_action(manager: TaskManager, args: argparse.Namespace) -> int:
    """Dispatch complete/delete/start/stop/reset on a single task."""
    task_id = resolve_task_id(manager, args.task_id)
    if task_id is None:
        return 1

    actions = {
        "complete": (manager.mark_task_as_completed, "Completed"),
        "delete": (manager.delete_task, "Deleted"),
        "start": (manager.start_timer, "Started timer for"),
        "stop": (manager.stop_timer, "Stopped timer for"),
        "reset": (manager.reset_timer, "Reset timer for"),
    }
    action, verb = actions[args.command]
    title = manager.get_task(task_id).title  # resolved above, so present
    if not action(task_id):
        return _report(manager) or 1

    output.success(f"{verb} {title}")
    if args.command == "stop":
        task = manager.get_task(task_id)
        if task is not None:
            output.info(f"Total time: {task.formatted_time_spent}")
    return 0


def run_stats(manager: TaskManager, args: argparse.Namespace) -> int:  # noqa: ARG001
    stats = manager.get_task_statistics()
    time_stats = manager.get_time_statistics()
    tasks = manager.tasks

    output.header("Tasks")
    print(f"  Total:        {stats.total}")
    print(f"  Completed:    {stats.completed} ({stats.completion_rate:.0%})")
    print(f"  Pending:      {stats.pending}")
    print(f"  In progress:  {stats.in_progress}")
    print(f"  Overdue:      {stats.overdue} ({stats.overdue_rate:.0%})")
    print(f"  Productivity: {productivity_score(tasks):.2f}")

    output.header("By priority")
    for priority, count in priority_distribution(tasks).items():
        print(f"  {priority.display_name:<12}  {count}")

    output.header("By status")
    for status, count in status_distribution(tasks).items():
        print(f"  {status.display_name:<12}  {count}")

    output.header("Time")
    print(f"  Total:        {time_stats.formatted_total_time}")
    print(f"  Average:      {time_stats.formatted_average_time}")
    print(f"  Tracked:      {time_stats.tasks_with_time}")
    print(f"  Running:      {time_stats.currently_running}")
    return 0
