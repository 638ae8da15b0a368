"""Pydantic model for the on-disk todo document.

The backing file holds a single JSON object:

    {
      "tasks": [
        "buy milk",
        "write report"
      ]
    }

Example:
    >>> doc = TodoDocument.model_validate({"tasks": ["buy milk"]})
    >>> doc.tasks
    ['buy milk']

"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class TodoDocument(BaseModel):
    """The full persisted state: an ordered list of task descriptions.

    Tasks are opaque strings. Empty strings and duplicates are allowed, and
    list order is both display order and removal-number order.

    Unknown top-level keys in an existing file are kept and written back
    unchanged on save.

    Attributes:
        tasks: Task descriptions in insertion order.

    """

    model_config = ConfigDict(extra="allow")

    tasks: list[StrictStr] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def _normalize_tasks(cls, value: Any) -> Any:
        """Treat a null or non-array ``tasks`` field as an empty list."""
        if not isinstance(value, list):
            return []
        return value
