"""Filesystem locations for Notepad TUI.

Every other module asks here for paths instead of building its own.
"""

from __future__ import annotations

from pathlib import Path

NOTES_FILE_NAME = "notas.json"


def notepad_home() -> Path:
    """Return ``~/.notepad``, the config/data directory."""
    return Path.home() / ".notepad"


def notepad_file(name: str) -> Path:
    """Return ``~/.notepad/<name>``."""
    return notepad_home() / name


def default_notes_path() -> Path:
    return notepad_file(NOTES_FILE_NAME)


def preferences_path() -> Path:
    return notepad_file("preferences.yaml")


def log_path() -> Path:
    return notepad_file("notepad.log")
