from __future__ import annotations

from typing import Protocol

from json_store import StrPath

from .records import Record


class RecordStore(Protocol):
    """
    Translates between an in-memory Record and a JSON file at a caller-supplied path.
    """

    def save(self, path: StrPath, record: Record) -> None:
        """Overwrite the file at `path` with the encoded record."""
        ...

    def load(self, path: StrPath) -> Record:
        """Read and decode the record at `path` (never a partial record)."""
        ...
