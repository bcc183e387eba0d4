from __future__ import annotations


class RecordStoreError(Exception):
    """Base for record persistence failures. `str(err)` describes the underlying cause."""


class RecordIoError(RecordStoreError):
    """The file could not be read or written (missing, permission denied, disk full, is a directory)."""


class RecordDecodeError(RecordStoreError):
    """The file was read but is not valid JSON, not UTF-8, or not a well-formed record."""


class RecordEncodeError(RecordStoreError):
    """The record could not be serialized."""
