"""Notepad TUI - a small note-taking app for the terminal."""

__version__ = "0.1.0"
