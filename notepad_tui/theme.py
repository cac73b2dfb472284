"""Theme definitions for Notepad TUI.

Each preset maps to a Textual Theme that controls the base UI colors
($background, $surface, $panel, $primary, $error, etc.) used by the
widgets' CSS.
"""

from textual.theme import Theme

# Keys match preferences.THEME_NAMES.
TEXTUAL_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="notepad-dark",
        primary="#cc7700",
        secondary="#5599dd",
        accent="#445566",
        background="#1a1a1a",
        surface="#262626",
        panel="#555555",
        success="#5599dd",
        warning="#aaaa00",
        error="#ff3333",
        dark=True,
    ),
    "light": Theme(
        name="notepad-light",
        primary="#cc6600",
        secondary="#4488aa",
        accent="#667788",
        background="#fafafa",
        surface="#ddd3d3",  # note card color
        panel="#cccccc",
        success="#338855",
        warning="#aa8800",
        error="#ff0000",
        dark=False,
    ),
}


def get_textual_theme(name: str) -> Theme:
    """Return the Textual theme for *name*, defaulting to dark."""
    return TEXTUAL_THEMES.get(name, TEXTUAL_THEMES["dark"])
