"""Configuration management for the todo CLI.

Configuration Precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (a ``.env`` file is loaded if present)
    3. Default values

Environment Variables:
    TODO_FILE: Path of the JSON file holding the list (default: todo.json)
    TODO_LOG_LEVEL: Log level for stderr diagnostics (default: WARNING)

Example:
    >>> config = TodoConfig()
    >>> config = TodoConfig(todo_file="work.json", log_level="DEBUG")

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv

from todo_cli.exceptions import ConfigurationError
from todo_cli.store import DEFAULT_TODO_FILE

load_dotenv()


@dataclass(frozen=True, slots=True)
class TodoConfig:
    """Immutable settings for one CLI run.

    Attributes:
        todo_file: Path of the backing JSON file, relative to the working directory.
        log_level: Standard logging level name.

    """

    DEFAULT_LOG_LEVEL: ClassVar[str] = "WARNING"
    LOG_LEVELS: ClassVar[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    todo_file: Path = field(
        default_factory=lambda: Path(_get_env("TODO_FILE", DEFAULT_TODO_FILE))
    )
    log_level: str = field(
        default_factory=lambda: _get_env("TODO_LOG_LEVEL", TodoConfig.DEFAULT_LOG_LEVEL)
    )

    def __post_init__(self) -> None:
        """Normalize and validate configuration after initialization."""
        # Use object.__setattr__ since dataclass is frozen
        object.__setattr__(self, "todo_file", Path(self.todo_file))
        object.__setattr__(self, "log_level", str(self.log_level).strip().upper())
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.

        """
        if not str(self.todo_file).strip() or self.todo_file == Path():
            raise ConfigurationError("todo_file cannot be empty")

        if self.log_level not in self.LOG_LEVELS:
            valid = ", ".join(self.LOG_LEVELS)
            raise ConfigurationError(
                f"Invalid log_level '{self.log_level}'. Must be one of: {valid}"
            )

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``logging.Logger.setLevel``."""
        return logging.getLevelName(self.log_level)


def _get_env(key: str, default: str) -> str:
    """Get environment variable, falling back to default when unset or empty."""
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value
