"""Base JSON persistence store."""

from __future__ import annotations

import json
import os
from pathlib import Path


class JsonStore:
    """Simple JSON file store with atomic write.

    Subclasses decide what a missing or malformed file means; the base
    only reads (raising on failure) and writes.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # -- core I/O -------------------------------------------------------------

    def read_raw(self) -> dict | list:
        """Read and parse the JSON file.

        Raises ``FileNotFoundError`` when the file is absent, ``OSError`` when
        it cannot be read and ``ValueError`` (``json.JSONDecodeError`` or
        ``UnicodeDecodeError``) when it is not valid UTF-8 JSON.
        """
        return json.loads(self.path.read_text(encoding="utf-8"))

    def save_raw(self, data: dict | list) -> None:
        """Write *data* as pretty-printed JSON, creating parents as needed.

        The text goes to a sibling temp file first, which then replaces the
        target, so a failed write never leaves a truncated file behind.
        """
        text = json.dumps(data, indent=2, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(f".{self.path.name}.{os.getpid()}.tmp")
        try:
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(self.path)
        finally:
            if tmp.exists():
                tmp.unlink()
