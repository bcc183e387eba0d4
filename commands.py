from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import ValidationError

from persistence import AsyncDiskRecordStore, DiskRecordStore, Record, RecordStoreError

RECORD_STORE = DiskRecordStore()
ASYNC_RECORD_STORE = AsyncDiskRecordStore(RECORD_STORE)


class CommandError(Exception):
    """
    The one error channel exposed to the host: `str(err)` is the cause's message.
    I/O and decode failures are not distinguished here.
    """


def greet(name: str) -> str:
    return f"Hello, {name}! You've been greeted!"


def _coerce_record(data: Record | Mapping[str, Any]) -> Record:
    if isinstance(data, Record):
        return data
    if not isinstance(data, Mapping):
        raise CommandError(f"`data` must be an object with `name` and `value`, got {type(data).__name__}")
    try:
        return Record.model_validate(dict(data))
    except ValidationError as e:
        raise CommandError(str(e)) from e


def _require_path(path: Any) -> str:
    # An int would be taken by open() as a raw file descriptor.
    if not isinstance(path, str):
        raise CommandError(f"`path` must be a string, got {type(path).__name__}")
    return path


def save_json_file(path: str, data: Record | Mapping[str, Any]) -> None:
    path = _require_path(path)
    record = _coerce_record(data)
    try:
        RECORD_STORE.save(path, record)
    except RecordStoreError as e:
        raise CommandError(str(e)) from e


def load_json_file(path: str) -> Record:
    path = _require_path(path)
    try:
        return RECORD_STORE.load(path)
    except RecordStoreError as e:
        raise CommandError(str(e)) from e


async def save_json_file_async(path: str, data: Record | Mapping[str, Any]) -> None:
    path = _require_path(path)
    record = _coerce_record(data)
    try:
        await ASYNC_RECORD_STORE.save(path, record)
    except RecordStoreError as e:
        raise CommandError(str(e)) from e


async def load_json_file_async(path: str) -> Record:
    path = _require_path(path)
    try:
        return await ASYNC_RECORD_STORE.load(path)
    except RecordStoreError as e:
        raise CommandError(str(e)) from e


# Command name -> handler, as registered with the host.
COMMANDS: dict[str, Callable[..., Any]] = {
    "greet": greet,
    "save_json_file": save_json_file,
    "load_json_file": load_json_file,
}

ASYNC_COMMANDS: dict[str, Callable[..., Any]] = {
    "save_json_file": save_json_file_async,
    "load_json_file": load_json_file_async,
}
