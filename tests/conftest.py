"""Test configuration and shared fixtures."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from todo_cli.service import TodoService
from todo_cli.store import TaskStore


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the shell or a .env file out of the tests."""
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)
    yield
    package_logger = logging.getLogger("todo_cli")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.WARNING)


@pytest.fixture
def todo_path(tmp_path) -> Path:
    """Path of a backing file that does not exist yet."""
    return tmp_path / "todo.json"


@pytest.fixture
def write_todo_file(todo_path):
    """Write raw content (a dict/list as JSON, or text as-is) to the backing file."""

    def _write(content) -> Path:
        if isinstance(content, str):
            todo_path.write_text(content, encoding="utf-8")
        else:
            todo_path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return todo_path

    return _write


@pytest.fixture
def store(todo_path) -> TaskStore:
    """Create a store backed by a temporary file."""
    return TaskStore(todo_path)


@pytest.fixture
def service(store) -> TodoService:
    """Create a service over the temporary store."""
    return TodoService(store)
