"""Note list and popup-form state for Notepad TUI.

``NotepadState`` is the single source of truth the UI renders from.  It
holds the note list and the draft form, and every command that changes
either one notifies subscribers so the presentation can re-render.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .log import logger
from .models import Note
from .persistence import LoadStatus, NoteStore


class FormMode(Enum):
    HIDDEN = "hidden"
    EDITING = "editing"


class FormStateError(RuntimeError):
    """A form command was issued in a state that does not allow it."""


@dataclass
class DraftForm:
    """The popup's transient fields.  Never persisted."""

    title: str = ""
    content: str = ""
    visible: bool = False
    show_error: bool = False

    @property
    def mode(self) -> FormMode:
        return FormMode.EDITING if self.visible else FormMode.HIDDEN

    @property
    def is_valid(self) -> bool:
        return bool(self.title) and bool(self.content)


Listener = Callable[["NotepadState"], None]


class NotepadState:
    """Note list plus popup state, with write-through persistence."""

    def __init__(self, store: NoteStore, notes: list[Note] | None = None) -> None:
        self.store = store
        self.load_status = LoadStatus.LOADED
        self.corrupt_backup: Path | None = None
        if notes is None:
            result = store.load_result()
            notes = result.notes
            self.load_status = result.status
            self.corrupt_backup = result.backup
        self._notes: list[Note] = list(notes)
        self.form = DraftForm()
        self.last_save_ok = True
        self._listeners: list[Listener] = []

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def mode(self) -> FormMode:
        return self.form.mode

    # -- observers ------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every state change.  Returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("state listener %r failed", listener)

    def _require(self, mode: FormMode, command: str) -> None:
        if self.mode is not mode:
            raise FormStateError(f"{command}() is not allowed while {self.mode.value}")

    def _commit(self, notes: list[Note]) -> None:
        self._notes = notes
        self.last_save_ok = self.store.save(self._notes)

    # -- commands -------------------------------------------------------------

    def open_form(self) -> None:
        """Show the popup with an empty draft."""
        self.form = DraftForm(visible=True)
        self._notify()

    def set_title(self, text: str) -> None:
        self._require(FormMode.EDITING, "set_title")
        self.form.title = text
        self._notify()

    def set_content(self, text: str) -> None:
        self._require(FormMode.EDITING, "set_content")
        self.form.content = text
        self._notify()

    def submit(self) -> Note | None:
        """Turn the draft into a note.

        With an empty title or content the error flag is raised and nothing
        else changes; returns ``None``.  Otherwise the note is appended and
        saved, the form is reset and hidden, and the new note is returned.
        """
        self._require(FormMode.EDITING, "submit")
        if not self.form.is_valid:
            self.form.show_error = True
            self._notify()
            return None

        note = Note(title=self.form.title, content=self.form.content)
        self._commit(self.store.append(self._notes, note))
        self.form = DraftForm()
        self._notify()
        return note

    def cancel(self) -> None:
        """Hide the popup and drop the draft."""
        if self.mode is FormMode.HIDDEN:
            return
        self.form = DraftForm()
        self._notify()

    def delete_note(self, index: int) -> Note:
        """Remove and return the note at *index*, then save."""
        self._require(FormMode.HIDDEN, "delete_note")
        remaining = self.store.remove_at(self._notes, index)
        removed = self._notes[index]
        self._commit(remaining)
        self._notify()
        return removed
