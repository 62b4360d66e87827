"""CLI entry point for tasktrack."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging
from .models import Priority, TaskStatus
from .services import TaskSortOrder


def priority_arg(value: str) -> Priority:
    """argparse type for priorities given by name or number."""
    try:
        return Priority.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tasktrack",
        description="Track tasks and the time spent on them",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory containing tasktrack.yml (default: current directory)",
    )
    parser.add_argument(
        "--tasks-file",
        type=Path,
        default=None,
        help="JSON file to store tasks in (default: ~/Documents/tasks.json)",
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Keep tasks in memory only (nothing is saved)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    list_parser = sub.add_parser("list", help="List tasks")
    list_parser.add_argument("--status", choices=[s.value for s in TaskStatus])
    list_parser.add_argument(
        "--priority", type=priority_arg, help="low, medium, high, urgent or 1-4"
    )
    list_parser.add_argument("--search", help="Text to find in title or description")
    list_parser.add_argument(
        "--tag", action="append", help="Require a tag (repeat to require several)"
    )
    list_parser.add_argument("--hide-completed", action="store_true")
    list_parser.add_argument(
        "--sort",
        choices=[o.value for o in TaskSortOrder],
        default=TaskSortOrder.CREATED_AT.value,
    )

    add_parser = sub.add_parser("add", help="Create a task")
    add_parser.add_argument("title")
    add_parser.add_argument("-d", "--description", default="")
    add_parser.add_argument("-p", "--priority", type=priority_arg, default="medium")
    add_parser.add_argument("--due", help="Due date, ISO format (2026-01-31 or 2026-01-31T17:00)")
    add_parser.add_argument("-t", "--tags", help="Comma-separated tags")

    for name, help_text in [
        ("complete", "Mark a task completed"),
        ("delete", "Delete a task"),
        ("start", "Start a task's timer (stops any other)"),
        ("stop", "Stop a task's timer"),
        ("reset", "Reset a task's tracked time"),
    ]:
        action_parser = sub.add_parser(name, help=help_text)
        action_parser.add_argument("task_id", help="Task ID or unique prefix")

    sub.add_parser("stats", help="Show task and time statistics")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Build settings from CLI args; unset flags fall back to TASKTRACK_* env
    settings_kwargs: dict = {}
    if args.project_root:
        settings_kwargs["project_root"] = args.project_root
    if args.tasks_file:
        settings_kwargs["tasks_file"] = args.tasks_file
    if args.memory:
        settings_kwargs["storage"] = "memory"
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)
    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help stays fast
    from .app import run

    raise SystemExit(run(settings, args))


if __name__ == "__main__":
    main()
