"""Modal screen widgets for Notepad TUI."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..state import FormMode, NotepadState

ERROR_TEXT = "Fill the fields!!!"


class NoteFormScreen(ModalScreen[None]):
    """Popup for composing a new note.

    The screen is a view of ``state.form``: input changes and button presses
    become state commands, and the error line follows ``show_error``.
    """

    DEFAULT_CSS = """
    NoteFormScreen {
        align: center middle;
    }
    #note-form {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $panel;
        border: round $primary;
    }
    #note-form-title {
        width: 100%;
        content-align: center middle;
        margin-bottom: 1;
    }
    #form-error {
        color: $error;
        display: none;
    }
    #form-error.visible {
        display: block;
    }
    #note-form-buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }
    #note-form-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(self, state: NotepadState) -> None:
        super().__init__()
        self._notepad_state = state
        self._state_unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="note-form"):
            yield Static("Make a new note!", id="note-form-title")
            yield Input(
                value=self._notepad_state.form.title,
                placeholder="Put the title of your note!",
                id="title-input",
            )
            yield Input(
                value=self._notepad_state.form.content,
                placeholder="Put the content of your note!",
                id="content-input",
            )
            yield Static(ERROR_TEXT, id="form-error")
            with Horizontal(id="note-form-buttons"):
                yield Button("Add new note", id="submit-note", variant="primary")
                yield Button("Cancel", id="cancel-note")

    def on_mount(self) -> None:
        self._state_unsubscribe = self._notepad_state.subscribe(self._sync)
        self._sync(self._notepad_state)
        self.query_one("#title-input", Input).focus()

    def on_unmount(self) -> None:
        if self._state_unsubscribe is not None:
            self._state_unsubscribe()
            self._state_unsubscribe = None

    def _sync(self, state: NotepadState) -> None:
        self.query_one("#form-error", Static).set_class(
            state.form.show_error, "visible"
        )

    @property
    def error_visible(self) -> bool:
        return self.query_one("#form-error", Static).has_class("visible")

    # -- input ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        # Late events can arrive after the form was closed
        if self._notepad_state.mode is not FormMode.EDITING:
            return
        if event.input.id == "title-input":
            self._notepad_state.set_title(event.value)
        elif event.input.id == "content-input":
            self._notepad_state.set_content(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "title-input":
            self.query_one("#content-input", Input).focus()
        elif event.input.id == "content-input":
            self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit-note":
            event.stop()
            self._submit()
        elif event.button.id == "cancel-note":
            event.stop()
            self.action_cancel()

    def _submit(self) -> None:
        if self._notepad_state.mode is FormMode.EDITING:
            self._notepad_state.submit()

    def action_cancel(self) -> None:
        self._notepad_state.cancel()
