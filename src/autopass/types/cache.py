"""Typed cache payload structures."""

from __future__ import annotations

from typing import Any, TypedDict


class EntrySnapshot(TypedDict):
    """Serialized entry, restorable without decrypting again."""

    name: str
    path: str
    checksum: str | None
    user_attributes: dict[str, Any]


class CachePayload(TypedDict):
    """Top-level cache payload persisted to disk."""

    version: int
    entries: list[EntrySnapshot]
