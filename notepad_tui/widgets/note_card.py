"""A single note in the note list."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Button, Static

from ..models import Note


class NoteCard(Vertical):
    """Bold title, content and a Remove button for the note at ``index``."""

    DEFAULT_CSS = """
    NoteCard {
        height: auto;
        background: $surface;
        padding: 1 2;
        margin-bottom: 1;
    }
    NoteCard .note-title {
        text-style: bold;
    }
    NoteCard .remove-button {
        margin-top: 1;
    }
    """

    class RemoveRequested(Message):
        """The user asked to delete ``note``, shown at ``index``."""

        def __init__(self, index: int, note: Note) -> None:
            super().__init__()
            self.index = index
            self.note = note

    def __init__(self, note: Note, index: int, **kwargs) -> None:
        super().__init__(classes="note-card", **kwargs)
        self.note = note
        self.index = index

    def compose(self) -> ComposeResult:
        yield Static(self.note.title, classes="note-title", markup=False)
        yield Static(self.note.content, classes="note-content", markup=False)
        yield Button("Remove", classes="remove-button")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("remove-button"):
            event.stop()
            event.button.disabled = True
            self.post_message(self.RemoveRequested(self.index, self.note))
