"""Logging configuration for the todo CLI.

The package logs through the ``todo_cli`` logger, which stays silent until
``configure_logging`` attaches a handler. Log records go to stderr so they
never mix with command output on stdout.

Example:
    >>> import logging
    >>> from todo_cli.logger import configure_logging
    >>> configure_logging(level=logging.DEBUG)

"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger("todo_cli")

logger.setLevel(logging.WARNING)

# Prevent "No handler found" warnings when used as a library
logger.addHandler(logging.NullHandler())

_HANDLER_NAME = "todo_cli.console"


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Attach a console handler to the ``todo_cli`` logger.

    Calling this again replaces the handler added by a previous call.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``.
        format_string: Custom format string for log messages.
        stream: Output stream (defaults to sys.stderr).

    """
    if format_string is None:
        format_string = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    if stream is None:
        stream = sys.stderr

    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    logger.setLevel(level)
