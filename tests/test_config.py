"""Unit tests for the configuration module."""

from __future__ import annotations

import logging
import os
from dataclasses import FrozenInstanceError
from pathlib import Path
from unittest.mock import patch

import pytest
from todo_cli.config import TodoConfig
from todo_cli.exceptions import ConfigurationError


class TestTodoConfig:
    """Tests for the TodoConfig class."""

    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = TodoConfig()

        assert config.todo_file == Path("todo.json")
        assert config.log_level == "WARNING"
        assert config.log_level_number == logging.WARNING

    def test_environment_variables(self):
        """Test values from environment variables."""
        env = {"TODO_FILE": "work/tasks.json", "TODO_LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env):
            config = TodoConfig()

        assert config.todo_file == Path("work/tasks.json")
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_empty_env_var_uses_default(self):
        """Test an empty variable falls back to the default."""
        with patch.dict(os.environ, {"TODO_FILE": ""}):
            config = TodoConfig()

        assert config.todo_file == Path("todo.json")

    def test_constructor_overrides_env_var(self):
        """Test constructor value overrides environment variable."""
        with patch.dict(os.environ, {"TODO_FILE": "env.json"}):
            config = TodoConfig(todo_file="arg.json")

        assert config.todo_file == Path("arg.json")

    def test_invalid_log_level(self):
        """Test unknown log level raises."""
        with pytest.raises(ConfigurationError, match="Invalid log_level"):
            TodoConfig(log_level="LOUD")

    def test_empty_todo_file(self):
        """Test empty path raises."""
        with pytest.raises(ConfigurationError, match="todo_file cannot be empty"):
            TodoConfig(todo_file="")

    def test_immutability(self):
        """Test configuration cannot be modified."""
        config = TodoConfig()

        with pytest.raises(FrozenInstanceError):
            config.log_level = "DEBUG"  # type: ignore[misc]
