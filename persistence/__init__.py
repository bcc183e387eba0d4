from __future__ import annotations

from .disk_store import DiskRecordStore
from .errors import RecordDecodeError, RecordEncodeError, RecordIoError, RecordStoreError
from .interfaces import RecordStore
from .records import Record
from .repositories import AsyncDiskRecordStore, AsyncRecordRepository

__all__ = [
    "Record",
    "RecordStore",
    "DiskRecordStore",
    "AsyncRecordRepository",
    "AsyncDiskRecordStore",
    "RecordStoreError",
    "RecordIoError",
    "RecordDecodeError",
    "RecordEncodeError",
]
