"""Widget classes for Notepad TUI."""

from .note_card import NoteCard
from .screens import NoteFormScreen

__all__ = [
    "NoteCard",
    "NoteFormScreen",
]
