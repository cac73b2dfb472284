"""User preferences for Notepad TUI.

Loads settings from ~/.notepad/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .platform import default_notes_path, preferences_path

THEME_NAMES = ("dark", "light")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULT_YAML = """\
# Notepad TUI Preferences
# Delete this file to reset to defaults.

storage:
  notes_file: ""                 # empty = ~/.notepad/notas.json

display:
  theme: "dark"                  # dark | light

logging:
  level: "WARNING"               # DEBUG, INFO, WARNING, ERROR
"""


@dataclass
class StoragePreferences:
    """Where the note list lives."""

    notes_file: str = ""  # Empty means the default location

    @property
    def notes_path(self) -> Path:
        if self.notes_file:
            return Path(self.notes_file).expanduser()
        return default_notes_path()


@dataclass
class DisplayPreferences:
    theme: str = "dark"


@dataclass
class LoggingPreferences:
    level: str = "WARNING"


@dataclass
class Preferences:
    """Top-level preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or preferences_path()
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise ValueError("preferences must be a mapping")
            if isinstance(data.get("storage"), dict):
                sdata = data["storage"]
                if "notes_file" in sdata:
                    prefs.storage.notes_file = str(sdata["notes_file"] or "")
            if isinstance(data.get("display"), dict):
                ddata = data["display"]
                theme = str(ddata.get("theme", "")).lower()
                if theme in THEME_NAMES:
                    prefs.display.theme = theme
            if isinstance(data.get("logging"), dict):
                level = str(data["logging"].get("level", "")).upper()
                if level in _LOG_LEVELS:
                    prefs.logging.level = level
        except (OSError, ValueError, yaml.YAMLError):
            # Fall back to defaults on any parse error
            logger.debug("failed to load preferences from %s", path, exc_info=True)
            prefs = Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs


def save_theme_name(name: str, path: Path | None = None) -> None:
    """Persist the theme choice to the preferences file.

    Surgically updates only the theme value, preserving the rest of the
    file (including user comments) as-is.
    """
    path = path or preferences_path()
    try:
        if path.exists():
            text = path.read_text(encoding="utf-8")
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        value = f'"{name}"'
        if re.search(r"^\s+theme:", text, re.MULTILINE):
            text = re.sub(
                r'^(\s+theme:)\s*(?:"[^"]*"|\S+)(.*?)$',
                rf"\1 {value}\2",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(r"^display:", text, re.MULTILINE):
            # display section exists but no theme key
            text = re.sub(
                r"^(display:.*)$",
                f"\\1\n  theme: {value}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            # No display section at all — append it
            text = text.rstrip() + f"\n\ndisplay:\n  theme: {value}\n"

        path.write_text(text, encoding="utf-8")
    except OSError:
        logger.debug("failed to save theme to %s", path, exc_info=True)
