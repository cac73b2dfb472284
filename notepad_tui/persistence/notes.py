"""Note-list persistence store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from ._base import JsonStore
from ..log import logger
from ..models import Note


class LoadStatus(Enum):
    """How the note list was obtained at load time."""

    LOADED = "loaded"
    MISSING = "missing"  # no file yet: fresh install
    CORRUPT = "corrupt"  # file present but not a list of notes
    UNREADABLE = "unreadable"  # file present but the read itself failed


@dataclass
class LoadResult:
    notes: list[Note]
    status: LoadStatus
    backup: Path | None = None  # where a corrupt file was moved to


class NoteStore(JsonStore):
    """The ordered note list.

    On-disk format: ``[{"title": ..., "content": ...}, ...]`` in display
    order.  Every mutation made through the app is followed by a full
    ``save()`` of the list.
    """

    # -- load -----------------------------------------------------------------

    def load(self) -> list[Note]:
        """Load the note list; missing or unreadable files yield ``[]``."""
        return self.load_result().notes

    def load_result(self) -> LoadResult:
        """Load the note list and report whether it was found, missing or corrupt.

        A corrupt file is moved aside (see ``_backup_corrupt``) so the next
        save does not destroy whatever the user had in it.  A file that
        cannot be read at all is left where it is.
        """
        try:
            raw = self.read_raw()
        except FileNotFoundError:
            return LoadResult(notes=[], status=LoadStatus.MISSING)
        except OSError:
            logger.warning("notes file %s is unreadable", self.path, exc_info=True)
            return LoadResult(notes=[], status=LoadStatus.UNREADABLE)
        except ValueError:
            logger.warning("notes file %s is not valid JSON", self.path, exc_info=True)
            return LoadResult(
                notes=[], status=LoadStatus.CORRUPT, backup=self._backup_corrupt()
            )

        try:
            notes = self._parse(raw)
        except ValueError:
            logger.warning("notes file %s has an unexpected shape", self.path, exc_info=True)
            return LoadResult(
                notes=[], status=LoadStatus.CORRUPT, backup=self._backup_corrupt()
            )

        logger.debug("loaded %d notes from %s", len(notes), self.path)
        return LoadResult(notes=notes, status=LoadStatus.LOADED)

    @staticmethod
    def _parse(raw: object) -> list[Note]:
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        return [Note.from_dict(item) for item in raw]

    def _backup_corrupt(self) -> Path | None:
        """Rename the corrupt file to ``<name>.corrupt-<timestamp>``.

        An existing backup is never overwritten; a ``-<n>`` suffix is added
        until the name is free.
        """
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        backup = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        counter = 1
        while backup.exists():
            backup = self.path.with_name(f"{self.path.name}.corrupt-{stamp}-{counter}")
            counter += 1
        try:
            self.path.replace(backup)
        except OSError:
            logger.warning("could not back up corrupt notes file %s", self.path, exc_info=True)
            return None
        logger.warning("corrupt notes file moved to %s", backup)
        return backup

    # -- save -----------------------------------------------------------------

    def save(self, notes: list[Note]) -> bool:
        """Overwrite the file with the full *notes* list.

        Failures are logged and reported as ``False``; they never raise.
        """
        try:
            self.save_raw([note.to_dict() for note in notes])
        except (OSError, TypeError, ValueError):
            logger.warning("failed to save notes to %s", self.path, exc_info=True)
            return False
        logger.debug("saved %d notes to %s", len(notes), self.path)
        return True

    # -- list operations ------------------------------------------------------

    @staticmethod
    def append(notes: list[Note], note: Note) -> list[Note]:
        """Return a new list with *note* at the end.  Caller must ``save()``."""
        return [*notes, note]

    @staticmethod
    def remove_at(notes: list[Note], index: int) -> list[Note]:
        """Return a new list without the note at *index*.  Caller must ``save()``.

        Only defined for ``0 <= index < len(notes)``; anything else raises
        ``IndexError``.
        """
        if not 0 <= index < len(notes):
            raise IndexError(f"note index {index} out of range (0..{len(notes) - 1})")
        return notes[:index] + notes[index + 1 :]
