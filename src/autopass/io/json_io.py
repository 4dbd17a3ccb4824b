"""JSON read/write helpers with atomic persistence."""

from __future__ import annotations

import base64
import datetime
import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def to_json_text(payload: object) -> str:
    """Serialize ``payload``; dates, paths and binary values become strings, sets become lists."""
    return json.dumps(payload, indent=2, sort_keys=True, default=_json_default)


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True, default=_json_default)
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def _json_default(value: object) -> object:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
