"""Business logic layer for todo commands."""

from __future__ import annotations

import logging

from todo_cli.store import TaskStore

logger = logging.getLogger(__name__)


class TodoService:
    """Runs one command's load, mutate and save sequence against a store.

    Each call reads the file fresh. Mutating calls save only after the
    mutation succeeded, so a rejected remove never touches the file.
    """

    def __init__(self, store: TaskStore) -> None:
        """Initialize service with a task store."""
        self._store = store

    def list_tasks(self) -> list[str]:
        """Get all tasks in display order."""
        return list(self._store.load().tasks)

    def add_task(self, text: str) -> str:
        """Append a task and persist it."""
        document = self._store.load()
        self._store.add(document, text)
        self._store.save(document)
        logger.info("Added task #%d", len(document.tasks))
        return text

    def remove_task(self, position: str | int) -> str:
        """Remove the task at a 1-based position and persist the result.

        Returns:
            The removed task text.

        Raises:
            InvalidTaskNumberError: If position is not a valid task number.

        """
        document = self._store.load()
        _, removed = self._store.remove(document, position)
        self._store.save(document)
        logger.info("Removed task #%s", str(position).strip())
        return removed
