"""Entry point for Notepad TUI CLI."""

from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path

from . import __version__
from .log import logger, setup_logging
from .platform import log_path, preferences_path
from .preferences import THEME_NAMES, load_preferences


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Notepad TUI")
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"notepad-tui {__version__}",
    )
    parser.add_argument(
        "--notes-file",
        "-f",
        type=Path,
        help="JSON file holding the notes (default: ~/.notepad/notas.json)",
    )
    parser.add_argument(
        "--theme",
        choices=THEME_NAMES,
        help="Color theme (overrides the preferences file)",
    )
    parser.add_argument(
        "--preferences",
        type=Path,
        help="Preferences file (default: ~/.notepad/preferences.yaml)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run Notepad TUI."""
    args = build_parser().parse_args(argv)

    prefs_file = args.preferences or preferences_path()
    prefs = load_preferences(prefs_file)
    setup_logging(prefs.logging.level, log_path())

    notes_path = args.notes_file or prefs.storage.notes_path
    theme_name = args.theme or prefs.display.theme
    logger.debug("starting with notes file %s, theme %s", notes_path, theme_name)

    try:
        from .app import run_app
        from .persistence import NoteStore
        from .state import NotepadState

        run_app(
            NotepadState(NoteStore(notes_path)),
            theme_name=theme_name,
            preferences_file=prefs_file,
        )
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.exception("Fatal error in notepad-tui")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
