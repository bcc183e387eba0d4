from __future__ import annotations

import json
import os
from typing import Any, Union

StrPath = Union[str, os.PathLike]


def encode_json_pretty(payload: Any, *, indent: int = 2) -> str:
    """
    Encode `payload` as indented, human-readable JSON.

    Keys keep insertion order and non-ASCII text is written as-is. No trailing newline,
    so encoding the same payload twice yields identical text.
    """
    return json.dumps(payload, indent=indent, ensure_ascii=False, separators=(",", ": "))


def write_json_bytes(path: StrPath, data: bytes) -> None:
    """
    Overwrite `path` with already-encoded `data`.

    Not atomic: the file is truncated first, then written. The parent directory must exist.
    """
    with open(path, "wb") as f:
        f.write(data)


def read_json_text(path: StrPath) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()
