"""Configuration service for loading tasktrack.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import TasktrackConfig
from ..models.config import DEFAULT_TASKS_FILENAME, ValidationConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "tasktrack.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory that may contain tasktrack.yml
        """
        self.project_root = project_root
        self._config: TasktrackConfig | None = None
        self._config_error: str | None = None

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> TasktrackConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_validation_config(self) -> ValidationConfig:
        """Convenience method to get validation limits."""
        return self.get_config().validation

    def resolve_tasks_file(self, default: Path) -> Path:
        """Tasks file from config, relative to the project root, else ``default``."""
        path = self.get_config().storage.path
        if path is None:
            return default
        path = path.expanduser()
        if path.is_absolute():
            return path
        return self.project_root / path

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> TasktrackConfig:
        """Load configuration from file or return default."""
        config_path = self.project_root / self.CONFIG_FILE
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return TasktrackConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning("%s", self._config_error)
                return TasktrackConfig.default()

            config = TasktrackConfig(**data)
            logger.info(
                "Loaded %s (storage=%s, file=%s)",
                self.CONFIG_FILE,
                config.storage.backend,
                config.storage.path or DEFAULT_TASKS_FILENAME,
            )
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning("%s", self._config_error)
            return TasktrackConfig.default()

        except (TypeError, ValidationError) as e:
            self._config_error = f"Invalid configuration in {self.CONFIG_FILE}: {e}"
            logger.warning("%s", self._config_error)
            return TasktrackConfig.default()
