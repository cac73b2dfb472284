"""Data models for Notepad TUI."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Note:
    """A title/content memo.

    Notes have no identifier; a note is addressed by its position in the
    note list.
    """

    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "content": self.content}

    @classmethod
    def from_dict(cls, data: Any) -> Note:
        """Build a note from its on-disk object.

        Raises ``ValueError`` unless *data* is a mapping with string
        ``title`` and ``content`` values.  Extra keys are ignored.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"note must be an object, got {type(data).__name__}")
        title = data.get("title")
        content = data.get("content")
        if not isinstance(title, str) or not isinstance(content, str):
            raise ValueError("note needs string 'title' and 'content' fields")
        return cls(title=title, content=content)
