"""Configuration management for the task CLI."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TASK_CLI_CONFIG"
DATA_DIR_ENV_VAR = "TASK_CLI_DATA_DIR"
DEFAULT_CONFIG_PATH = "~/.task-cli.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigModel:
    """Global configuration model for the task CLI."""

    # File locations
    data_dir: str = "."
    task_file: str = "task.txt"
    completed_file: str = "completed.txt"

    # Write behaviour
    atomic_writes: bool = False  # write to a temp file, then rename

    # Diagnostics
    warn_on_malformed_lines: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(str(self.data_dir))
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning(f"Ignoring unknown configuration key: {key}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_task_path(self) -> Path:
        """Get the pending-task file path."""
        return Path(self.data_dir) / self.task_file

    def get_completed_path(self) -> Path:
        """Get the completed-task file path."""
        return Path(self.data_dir) / self.completed_file


def get_config_path() -> Path:
    """Resolve the default configuration file location."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


class Config:
    """Configuration manager for the task CLI."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults.

        A missing file is not an error and is never created. A file that
        exists but cannot be read or parsed raises ``ConfigError``.
        """
        if cls._instance is not None:
            return cls._instance

        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = ConfigModel.from_yaml(f.read())
            except (OSError, yaml.YAMLError, TypeError, ConfigError) as e:
                raise ConfigError(f"Failed to load config from {config_path}: {e}", config_path) from e
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            config = ConfigModel()
            logger.debug(f"No configuration at {config_path}, using defaults")

        data_dir = os.environ.get(DATA_DIR_ENV_VAR)
        if data_dir:
            config.data_dir = os.path.expanduser(data_dir)

        cls._instance = config
        return config

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration (useful for testing)."""
        cls._instance = None


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)
