"""JSON file store for the todo list."""

from __future__ import annotations

import contextlib
import json
import logging
import re
import shutil
from pathlib import Path

from pydantic import ValidationError

from todo_cli.exceptions import InvalidTaskNumberError, StoreIOError, StoreParseError
from todo_cli.models import TodoDocument

logger = logging.getLogger(__name__)

DEFAULT_TODO_FILE = "todo.json"

# Stricter than a leading-digits parse: "2abc" and "1.5" are rejected.
_POSITION_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_position(position: str | int, length: int) -> int:
    """Convert a 1-based task number into a 0-based list offset.

    Args:
        position: Task number as typed by the user, e.g. ``"2"``.
        length: Current number of tasks.

    Returns:
        The list offset of the addressed task.

    Raises:
        InvalidTaskNumberError: If position is not an integer in 1..length.

    """
    text = str(position)
    if not _POSITION_RE.fullmatch(text):
        raise InvalidTaskNumberError(text)

    index = int(text) - 1
    if not 0 <= index < length:
        raise InvalidTaskNumberError(text)
    return index


def _is_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class TaskStore:
    """Loads, mutates and saves the todo document held in a single file.

    The file is read fresh on every ``load()`` and rewritten in full on every
    ``save()``. There is no locking: two processes saving the same file race
    and the last writer wins.
    """

    def __init__(self, path: str | Path = DEFAULT_TODO_FILE) -> None:
        """Initialize the store with the backing file path."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self._path

    def load(self) -> TodoDocument:
        """Read the backing file into a document.

        A missing file loads as an empty list and is not created.

        Raises:
            StoreParseError: If the file is not valid JSON or not a todo document.
            StoreIOError: If the file exists but cannot be read.

        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No todo file at %s, starting empty", self._path)
            return TodoDocument()
        except UnicodeDecodeError as exc:
            raise StoreParseError(f"{self._path} is not UTF-8 text: {exc}", self._path) from exc
        except OSError as exc:
            raise StoreIOError(
                f"cannot read {self._path}: {exc.strerror or exc}", self._path
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StoreParseError(f"malformed JSON in {self._path}: {exc}", self._path) from exc

        if not isinstance(data, dict):
            raise StoreParseError(
                f"expected a JSON object in {self._path}, got {type(data).__name__}",
                self._path,
            )

        try:
            document = TodoDocument.model_validate(data)
        except ValidationError as exc:
            raise StoreParseError(
                f"invalid todo document in {self._path}: {exc.error_count()} bad value(s)",
                self._path,
            ) from exc

        # JSON escapes can smuggle in lone surrogates, which cannot be printed or saved
        bad = [n for n, task in enumerate(document.tasks, start=1) if not _is_encodable(task)]
        if bad:
            raise StoreParseError(
                f"invalid todo document in {self._path}: task(s) {bad} are not valid Unicode text",
                self._path,
            )

        logger.debug("Loaded %d task(s) from %s", len(document.tasks), self._path)
        return document

    def save(self, document: TodoDocument) -> None:
        """Write the document to the backing file, replacing it in full.

        The JSON is written to a temporary file beside the target and then
        moved over it. A symlinked target is written through to the file it
        points at, and an existing file keeps its permission bits.

        Raises:
            StoreIOError: If the file cannot be written, including task text
                that cannot be encoded as UTF-8.

        """
        target = self._path.resolve()
        tmp_path = target.with_name(f".{target.name}.tmp")

        unencodable = StoreIOError(
            f"cannot write {self._path}: task text is not valid UTF-8",
            self._path,
            operation="write",
        )
        if not all(_is_encodable(task) for task in document.tasks):
            raise unencodable

        try:
            data = json.dumps(document.model_dump(), indent=2, ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as exc:
            raise unencodable from exc

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            if target.exists():
                shutil.copymode(target, tmp_path)
            tmp_path.replace(target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StoreIOError(
                f"cannot write {self._path}: {exc.strerror or exc}",
                self._path,
                operation="write",
            ) from exc

        logger.debug("Saved %d task(s) to %s", len(document.tasks), self._path)

    @staticmethod
    def add(document: TodoDocument, text: str) -> TodoDocument:
        """Append a task to the end of the list."""
        document.tasks.append(text)
        return document

    @staticmethod
    def remove(document: TodoDocument, position: str | int) -> tuple[TodoDocument, str]:
        """Remove the task at a 1-based position.

        Later tasks shift up by one. The document is untouched when the
        position is rejected.

        Returns:
            The document and the removed task text.

        Raises:
            InvalidTaskNumberError: If position is not an integer in 1..len(tasks).

        """
        index = parse_position(position, len(document.tasks))
        removed = document.tasks.pop(index)
        return document, removed
