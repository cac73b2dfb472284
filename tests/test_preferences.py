"""Tests for notepad_tui.preferences.

Covers load_preferences defaults, overrides, invalid files and the
save_theme_name round-trip.  All file I/O uses tmp_path so nothing touches
the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from notepad_tui.platform import default_notes_path
from notepad_tui.preferences import Preferences, load_preferences, save_theme_name


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.storage.notes_file == ""
        assert prefs.storage.notes_path == default_notes_path()
        assert prefs.display.theme == "dark"
        assert prefs.logging.level == "WARNING"

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert path.exists()

    def test_default_file_is_valid_yaml(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        data = yaml.safe_load(path.read_text())
        assert data["display"]["theme"] == "dark"
        assert data["storage"]["notes_file"] == ""

    def test_default_file_loads_to_defaults(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()


class TestLoadPreferencesOverrides:
    def test_notes_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        target = tmp_path / "my-notes.json"
        path.write_text(f'storage:\n  notes_file: "{target}"\n')
        prefs = load_preferences(path)
        assert prefs.storage.notes_path == target

    def test_notes_file_expands_home(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text('storage:\n  notes_file: "~/notes.json"\n')
        prefs = load_preferences(path)
        assert prefs.storage.notes_path == Path.home() / "notes.json"

    def test_theme(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  theme: Light\n")
        assert load_preferences(path).display.theme == "light"

    def test_unknown_theme_ignored(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  theme: neon\n")
        assert load_preferences(path).display.theme == "dark"

    def test_log_level(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("logging:\n  level: debug\n")
        assert load_preferences(path).logging.level == "DEBUG"

    def test_unknown_log_level_ignored(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("logging:\n  level: chatty\n")
        assert load_preferences(path).logging.level == "WARNING"


class TestLoadPreferencesInvalid:
    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("")
        assert load_preferences(path) == Preferences()

    def test_existing_file_not_overwritten(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display: [unclosed\n")
        load_preferences(path)
        assert path.read_text() == "display: [unclosed\n"


class TestSaveThemeName:
    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_theme_name("light", path)
        assert load_preferences(path).display.theme == "light"

    def test_preserves_comments(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_theme_name("light", path)
        text = path.read_text()
        assert "# dark | light" in text
        assert "# Notepad TUI Preferences" in text

    def test_creates_file_when_missing(self, tmp_path: Path):
        path = tmp_path / "sub" / "prefs.yaml"
        save_theme_name("light", path)
        assert load_preferences(path).display.theme == "light"

    def test_adds_display_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("logging:\n  level: INFO\n")
        save_theme_name("light", path)
        prefs = load_preferences(path)
        assert prefs.display.theme == "light"
        assert prefs.logging.level == "INFO"

    def test_adds_theme_key_to_existing_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  other: 1\n")
        save_theme_name("light", path)
        assert load_preferences(path).display.theme == "light"
