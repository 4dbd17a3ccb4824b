"""Cache loading and persistence for entry snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from autopass.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, CACHE_VERSION
from autopass.entry import Entry, EntryContext
from autopass.io import load_json_file, write_json_atomic
from autopass.types import CachePayload, EntrySnapshot

logger = logging.getLogger(__name__)


def new_cache() -> CachePayload:
    """Return an empty cache payload."""
    return {
        "version": CACHE_VERSION,
        "entries": [],
    }


def load_cache(cache_path: Path) -> CachePayload:
    """Load cache file if valid, otherwise return a new cache payload."""
    if not cache_path.is_file():
        return new_cache()

    try:
        payload = load_json_file(cache_path)
    except (OSError, ValueError):
        logger.debug("Ignoring unreadable cache file: %s", cache_path)
        return new_cache()

    if not isinstance(payload, dict) or payload.get("version") != CACHE_VERSION:
        return new_cache()

    return {
        "version": CACHE_VERSION,
        "entries": _normalize_entries(payload.get("entries")),
    }


def save_cache(cache_path: Path, payload: CachePayload) -> None:
    """Persist cache to disk atomically."""
    write_json_atomic(
        path=cache_path,
        payload=payload,
        temp_prefix=CACHE_TEMP_PREFIX,
        temp_suffix=CACHE_TEMP_SUFFIX,
    )


def snapshot_entries(entries: Iterable[Entry]) -> CachePayload:
    """Build a cache payload from entries, keeping whatever they have decrypted."""
    payload = new_cache()
    payload["entries"] = [entry.to_dict() for entry in entries]
    return payload


def update_cache(cache_path: Path, entries: Iterable[Entry]) -> CachePayload:
    """Merge snapshots of ``entries`` into the cache at ``cache_path``, keyed by path."""
    payload = load_cache(cache_path)
    merged = {snapshot["path"]: snapshot for snapshot in payload["entries"]}
    for entry in entries:
        snapshot = entry.to_dict()
        merged[snapshot["path"]] = snapshot
    payload["entries"] = sorted(merged.values(), key=lambda snapshot: snapshot["path"])
    save_cache(cache_path, payload)
    return payload


def restore_entries(payload: CachePayload, context: EntryContext | None = None) -> list[Entry]:
    """Rebuild entries from a cache payload with their cached checksums.

    A decrypted entry always carries the secret key next to ``path``, so any
    snapshot with more than that one attribute is restored as decrypted and
    only re-decrypts once :meth:`Entry.reload` sees a checksum change.
    """
    return [
        Entry.from_dict(snapshot, context, decrypted=len(snapshot["user_attributes"]) > 1)
        for snapshot in payload["entries"]
    ]


def _normalize_entries(raw_entries: object) -> list[EntrySnapshot]:
    if not isinstance(raw_entries, list):
        return []

    entries: list[EntrySnapshot] = []
    for value in raw_entries:
        if not isinstance(value, dict):
            continue

        name = value.get("name")
        path = value.get("path")
        checksum = value.get("checksum")
        user_attributes = value.get("user_attributes")

        if not isinstance(name, str):
            continue
        if not isinstance(path, str):
            continue
        if checksum is not None and not isinstance(checksum, str):
            continue
        if not isinstance(user_attributes, dict):
            continue

        entries.append(
            {
                "name": name,
                "path": path,
                "checksum": checksum,
                "user_attributes": user_attributes,
            }
        )
    return entries
