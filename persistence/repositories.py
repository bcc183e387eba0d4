from __future__ import annotations

import asyncio
from typing import Protocol

from json_store import StrPath

from .disk_store import DiskRecordStore
from .records import Record


class AsyncRecordRepository(Protocol):
    async def save(self, path: StrPath, record: Record) -> None: ...
    async def load(self, path: StrPath) -> Record: ...


class AsyncDiskRecordStore(AsyncRecordRepository):
    """
    Async wrapper around the disk-backed record store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: DiskRecordStore | None = None) -> None:
        self._store = store or DiskRecordStore()

    async def save(self, path: StrPath, record: Record) -> None:
        await asyncio.to_thread(self._store.save, path, record)

    async def load(self, path: StrPath) -> Record:
        return await asyncio.to_thread(self._store.load, path)
