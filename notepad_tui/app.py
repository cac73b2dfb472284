"""Main Notepad TUI application."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical, VerticalScroll
from textual.widgets import Button, Static

from .log import logger
from .models import Note
from .persistence import LoadStatus
from .preferences import THEME_NAMES, save_theme_name
from .state import FormMode, NotepadState
from .theme import TEXTUAL_THEMES, get_textual_theme
from .widgets import NoteCard, NoteFormScreen

WELCOME_TEXT = "Welcome, make your first note!"


class NotepadApp(App):
    """Notepad - a list of notes with a popup to add new ones."""

    TITLE = "Notepad"

    CSS = """
    #welcome {
        align: center middle;
    }
    #welcome-text {
        width: auto;
        text-style: bold;
        margin-bottom: 1;
    }
    #notes-view {
        display: none;
    }
    #note-list {
        padding: 1 2;
    }
    #list-new-bar {
        height: auto;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "new_note", "New note", show=True),
        Binding("ctrl+t", "toggle_theme", "Theme", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        state: NotepadState,
        theme_name: str = "dark",
        preferences_file: Path | None = None,
    ) -> None:
        super().__init__()
        self.notepad_state = state
        self._theme_name = theme_name if theme_name in TEXTUAL_THEMES else "dark"
        # Theme changes are only written back when a preferences file is given
        self._preferences_file = preferences_file
        self._shown_notes: tuple[Note, ...] | None = None
        self._state_unsubscribe = None

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        with Vertical(id="welcome"):
            with Center():
                yield Static(WELCOME_TEXT, id="welcome-text")
            with Center():
                yield Button("New note", id="welcome-new")
        with Vertical(id="notes-view"):
            yield VerticalScroll(id="note-list")
            with Center(id="list-new-bar"):
                yield Button("New note", id="list-new")

    def on_mount(self) -> None:
        # App.query_one searches the active screen, which may be the popup
        self._welcome = self.query_one("#welcome", Vertical)
        self._notes_view = self.query_one("#notes-view", Vertical)
        self._note_list = self.query_one("#note-list", VerticalScroll)

        for theme in TEXTUAL_THEMES.values():
            self.register_theme(theme)
        self.theme = get_textual_theme(self._theme_name).name

        self._state_unsubscribe = self.notepad_state.subscribe(self._sync_with_state)
        self._sync_with_state(self.notepad_state)
        self._report_load()

    def on_unmount(self) -> None:
        if self._state_unsubscribe is not None:
            self._state_unsubscribe()
            self._state_unsubscribe = None

    # ── State → view ────────────────────────────────────────────

    def _sync_with_state(self, state: NotepadState) -> None:
        notes = state.notes
        if notes != self._shown_notes:
            is_update = self._shown_notes is not None
            self._render_notes(notes)
            if is_update and not state.last_save_ok:
                self.notify(
                    f"Could not save notes to {state.store.path}",
                    title="Save failed",
                    severity="error",
                )

        form_open = isinstance(self.screen, NoteFormScreen)
        if state.form.visible and not form_open:
            self.push_screen(NoteFormScreen(state))
        elif not state.form.visible and form_open:
            self.pop_screen()

    def _render_notes(self, notes: tuple[Note, ...]) -> None:
        self._shown_notes = notes
        self._welcome.display = not notes
        self._notes_view.display = bool(notes)

        self._note_list.remove_children()
        if notes:
            self._note_list.mount_all(
                NoteCard(note, index) for index, note in enumerate(notes)
            )
        logger.debug("rendered %d notes", len(notes))

    def _report_load(self) -> None:
        status = self.notepad_state.load_status
        if status is LoadStatus.UNREADABLE:
            self.notify(
                f"Could not read {self.notepad_state.store.path}. Starting with no notes.",
                title="Notes file unreadable",
                severity="warning",
                timeout=10,
            )
            return
        if status is not LoadStatus.CORRUPT:
            return
        backup = self.notepad_state.corrupt_backup
        where = f" It was moved to {backup}." if backup else ""
        self.notify(
            f"The notes file could not be read and was ignored.{where}",
            title="Notes file damaged",
            severity="warning",
            timeout=10,
        )

    # ── Input → commands ────────────────────────────────────────

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("welcome-new", "list-new"):
            event.stop()
            self.action_new_note()

    def on_note_card_remove_requested(self, event: NoteCard.RemoveRequested) -> None:
        if self.notepad_state.mode is not FormMode.HIDDEN:
            return
        # Requests from cards rendered before the last delete are stale
        notes = self.notepad_state.notes
        if 0 <= event.index < len(notes) and notes[event.index] is event.note:
            self.notepad_state.delete_note(event.index)
        else:
            logger.debug("ignoring stale remove request for index %d", event.index)

    def action_new_note(self) -> None:
        if self.notepad_state.mode is FormMode.HIDDEN:
            self.notepad_state.open_form()

    def action_toggle_theme(self) -> None:
        index = THEME_NAMES.index(self._theme_name)
        self._theme_name = THEME_NAMES[(index + 1) % len(THEME_NAMES)]
        self.theme = get_textual_theme(self._theme_name).name
        if self._preferences_file is not None:
            save_theme_name(self._theme_name, self._preferences_file)


def run_app(
    state: NotepadState,
    theme_name: str = "dark",
    preferences_file: Path | None = None,
) -> None:
    """Create and run the Notepad app."""
    app = NotepadApp(state, theme_name=theme_name, preferences_file=preferences_file)
    app.run()
