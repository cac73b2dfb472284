"""Shared test fixtures for notepad-tui test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from notepad_tui.models import Note
from notepad_tui.persistence import NoteStore


@pytest.fixture
def notes_path(tmp_path: Path) -> Path:
    """Location of the notes file for a test (not created)."""
    return tmp_path / "notas.json"


@pytest.fixture
def store(notes_path: Path) -> NoteStore:
    return NoteStore(notes_path)


@pytest.fixture
def sample_notes() -> list[Note]:
    return [
        Note("Groceries", "Milk, eggs, bread"),
        Note("Call mom", "Sunday after lunch"),
        Note("Ideas", "  leading and trailing spaces  "),
    ]


@pytest.fixture
def write_notes(notes_path: Path):
    """Write raw note dicts (or any JSON value) to the notes file."""

    def _write(data) -> Path:
        notes_path.write_text(json.dumps(data), encoding="utf-8")
        return notes_path

    return _write
