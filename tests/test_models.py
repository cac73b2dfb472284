"""Tests for notepad_tui.models."""

from __future__ import annotations

import dataclasses

import pytest

from notepad_tui.models import Note


class TestNote:
    def test_to_dict(self):
        assert Note("A", "B").to_dict() == {"title": "A", "content": "B"}

    def test_from_dict(self):
        assert Note.from_dict({"title": "A", "content": "B"}) == Note("A", "B")

    def test_from_dict_ignores_extra_keys(self):
        note = Note.from_dict({"title": "A", "content": "B", "pinned": True})
        assert note == Note("A", "B")

    def test_empty_strings_are_allowed(self):
        assert Note.from_dict({"title": "", "content": ""}) == Note("", "")

    @pytest.mark.parametrize(
        "data",
        [
            ["A", "B"],
            "A",
            None,
            {"title": "A"},
            {"content": "B"},
            {"title": 1, "content": "B"},
            {"title": "A", "content": None},
        ],
    )
    def test_from_dict_rejects_bad_shapes(self, data):
        with pytest.raises(ValueError):
            Note.from_dict(data)

    def test_is_immutable(self):
        note = Note("A", "B")
        with pytest.raises(dataclasses.FrozenInstanceError):
            note.title = "C"  # type: ignore[misc]
