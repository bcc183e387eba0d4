from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from json_store import StrPath, encode_json_pretty, read_json_text, write_json_bytes

from .errors import RecordDecodeError, RecordEncodeError, RecordIoError
from .interfaces import RecordStore
from .records import Record

logger = logging.getLogger(__name__)


class DiskRecordStore(RecordStore):
    """
    Stores one Record as pretty-printed JSON at whatever path the caller names.

    - Overwrites in full, no temp file or rename.
    - Never creates directories.
    - Holds no state between calls; concurrent saves to one path are last-writer-wins.
    """

    def save(self, path: StrPath, record: Record) -> None:
        try:
            data = encode_json_pretty(record.to_disk_doc()).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.info("RECORD SAVE: encode failed path=%s err=%s", path, e)
            raise RecordEncodeError(str(e)) from e

        try:
            write_json_bytes(path, data)
        except (OSError, ValueError) as e:
            logger.info("RECORD SAVE: write failed path=%s err=%s", path, e)
            raise RecordIoError(str(e)) from e
        logger.debug("RECORD SAVE: path=%s bytes=%d", path, len(data))

    def load(self, path: StrPath) -> Record:
        try:
            raw = read_json_text(path)
        except UnicodeDecodeError as e:
            logger.info("RECORD LOAD: not utf-8 path=%s", path)
            raise RecordDecodeError(str(e)) from e
        except (OSError, ValueError) as e:
            # ValueError: embedded null byte in the path.
            logger.info("RECORD LOAD: read failed path=%s err=%s", path, e)
            raise RecordIoError(str(e)) from e

        try:
            doc = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.info("RECORD LOAD: invalid json path=%s err=%s", path, e)
            raise RecordDecodeError(str(e)) from e

        if not isinstance(doc, dict):
            logger.info("RECORD LOAD: not a json object path=%s type=%s", path, type(doc).__name__)
            raise RecordDecodeError(f"expected a JSON object, got {type(doc).__name__}")

        try:
            return Record.model_validate(doc)
        except ValidationError as e:
            logger.info("RECORD LOAD: bad record shape path=%s", path)
            raise RecordDecodeError(_describe_validation_error(e)) from e


def _describe_validation_error(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ())) or "record"
        parts.append(f"{loc}: {item.get('msg', 'invalid')}")
    return "; ".join(parts) or str(err)
