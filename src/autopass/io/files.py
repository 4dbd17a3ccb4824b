"""File-level helpers for content hashing."""

from __future__ import annotations

import hashlib
from pathlib import Path

from autopass.constants.entry import FILE_HASH_CHUNK_SIZE


def file_md5(path: Path) -> str:
    """Return MD5 hex digest for a file."""
    digest = hashlib.md5(usedforsecurity=False)
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def file_checksum(path: Path) -> str | None:
    """Return the content checksum for ``path``, or ``None`` when it does not exist."""
    if not path.is_file():
        return None
    return file_md5(path)
