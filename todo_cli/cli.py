"""Command-line interface for the todo list.

Usage:
    todo list
    todo add "buy milk"
    todo remove 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from todo_cli import __version__
from todo_cli.config import TodoConfig
from todo_cli.display import format_added, format_removed, format_task_list
from todo_cli.exceptions import ConfigurationError, InvalidTaskNumberError, StoreError
from todo_cli.logger import configure_logging
from todo_cli.service import TodoService
from todo_cli.store import TaskStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Manage a todo list stored in a local JSON file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List all todo items")

    add_parser = subparsers.add_parser("add", help="Add a new todo item")
    add_parser.add_argument("task", help="Task text")

    remove_parser = subparsers.add_parser("remove", help="Remove a todo item by its number")
    # Kept as text so non-numeric input reports "Invalid task number."
    remove_parser.add_argument("task_number", metavar="taskNumber", help="1-based task number")

    return parser


def _error(message: str) -> None:
    print(message, file=sys.stderr)


class CLI:
    """Command-line interface handler."""

    def __init__(self, service: TodoService) -> None:
        """Initialize CLI with a todo service."""
        self._service = service

    def run(self, args: argparse.Namespace) -> int:
        """Execute the requested command. Returns exit code."""
        if args.command is None:
            _error("No command specified. Use --help for usage.")
            return 1

        handler = getattr(self, f"_handle_{args.command}", None)
        if handler is None:
            _error(f"Unknown command: {args.command}")
            return 1
        return handler(args)

    def _handle_list(self, args: argparse.Namespace) -> int:
        """Handle list command."""
        try:
            tasks = self._service.list_tasks()
        except StoreError as e:
            logger.debug("list failed", exc_info=True)
            _error(f"{_describe(e)}: {e}")
            return 1

        print(format_task_list(tasks))
        return 0

    def _handle_add(self, args: argparse.Namespace) -> int:
        """Handle add command."""
        try:
            task = self._service.add_task(args.task)
        except StoreError as e:
            logger.debug("add failed", exc_info=True)
            _error(f"{_describe(e)}: {e}")
            return 1

        print(format_added(task))
        return 0

    def _handle_remove(self, args: argparse.Namespace) -> int:
        """Handle remove command."""
        try:
            removed = self._service.remove_task(args.task_number)
        except InvalidTaskNumberError as e:
            logger.debug("rejected task number %r", e.position)
            _error(str(e))
            return 1
        except StoreError as e:
            logger.debug("remove failed", exc_info=True)
            _error(f"{_describe(e)}: {e}")
            return 1

        print(format_removed(removed))
        return 0


def _describe(error: StoreError) -> str:
    """Prefix for a store failure, telling reads apart from writes."""
    if error.operation == "write":
        return "Error writing todo list"
    return "Error reading todo list"


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = TodoConfig()
    except ConfigurationError as e:
        _error(f"Configuration error: {e}")
        return 1

    configure_logging(level=config.log_level_number)
    logger.debug("Using todo file %s", config.todo_file)

    service = TodoService(TaskStore(config.todo_file))
    cli = CLI(service)

    return cli.run(args)
