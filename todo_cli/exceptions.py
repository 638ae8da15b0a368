"""Custom exception hierarchy for the todo CLI.

Exception Hierarchy:
    TodoError (base)
    ├── ConfigurationError      - Invalid settings (bad log level, empty path)
    ├── StoreError              - Backing file problems
    │   ├── StoreParseError     - File exists but is not a valid todo document
    │   └── StoreIOError        - Read/write failure other than a missing file
    └── InvalidTaskNumberError  - Remove position out of range or not a number

Example:
    >>> try:
    ...     removed = service.remove_task("7")
    ... except InvalidTaskNumberError as e:
    ...     print(e)
    Invalid task number.

"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base exception for all todo CLI errors.

    Attributes:
        message: Human-readable error description.

    """

    def __init__(self, message: str) -> None:
        """Initialize the exception."""
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        """Return a detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(TodoError):
    """Raised when the CLI configuration is invalid."""


class StoreError(TodoError):
    """Base class for errors involving the backing file.

    Attributes:
        path: Path of the backing file involved.
        operation: ``"read"`` or ``"write"``.

    """

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        operation: str = "read",
    ) -> None:
        """Initialize with the offending file path and operation."""
        self.path = Path(path) if path is not None else None
        self.operation = operation
        super().__init__(message)


class StoreParseError(StoreError, ValueError):
    """Raised when the backing file is not valid JSON or not a todo document."""


class StoreIOError(StoreError):
    """Raised when reading or writing the backing file fails.

    A missing file on read is not an error; it loads as an empty list.
    """


class InvalidTaskNumberError(TodoError, IndexError):
    """Raised when a remove position is non-numeric or outside 1..len(tasks).

    Attributes:
        position: The raw position text supplied by the caller.

    """

    def __init__(self, position: str) -> None:
        """Initialize with the rejected position."""
        self.position = position
        super().__init__("Invalid task number.")
