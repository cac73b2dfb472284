"""Persistence layer – each store owns its file path, data format, and I/O."""

from .notes import LoadResult, LoadStatus, NoteStore

__all__ = [
    "LoadResult",
    "LoadStatus",
    "NoteStore",
]
