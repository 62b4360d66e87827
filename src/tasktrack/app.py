"""Wiring from settings to a ready TaskManager."""

import argparse
import logging

from .config import Settings, default_tasks_file
from .repositories import InMemoryTaskRepository, JsonFileTaskRepository, TaskRepositoryProtocol
from .services import ConfigService, TaskManager

logger = logging.getLogger(__name__)


def build_repository(
    settings: Settings, config_service: ConfigService
) -> TaskRepositoryProtocol:
    """Pick the storage backend: settings first, then tasktrack.yml, then defaults."""
    backend = settings.storage or config_service.get_config().storage.backend
    if backend == "memory":
        logger.info("Using in-memory storage")
        return InMemoryTaskRepository()

    path = settings.tasks_file or config_service.resolve_tasks_file(default_tasks_file())
    path = path.expanduser()
    logger.info("Using tasks file %s", path)
    return JsonFileTaskRepository(path)


def build_manager(settings: Settings, config_service: ConfigService) -> TaskManager:
    return TaskManager(build_repository(settings, config_service))


def run(settings: Settings, args: argparse.Namespace) -> int:
    """Load tasks and execute the chosen subcommand."""
    from .cli import commands, output

    config_service = ConfigService(settings.project_root)
    config_service.get_config()
    if config_service.has_config_error:
        output.error(config_service.config_error or "Invalid configuration")

    manager = build_manager(settings, config_service)
    if not manager.load_tasks():
        output.error(str(manager.error))
        return 1

    if args.command == "list":
        return commands.run_list(manager, args)
    if args.command == "add":
        return commands.run_add(manager, args, config_service.get_validation_config())
    if args.command == "stats":
        return commands.run_stats(manager, args)
    return commands.run_task_action(manager, args)
