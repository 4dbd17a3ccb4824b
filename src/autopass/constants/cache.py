"""Constants used by the entry cache."""

from __future__ import annotations

CACHE_VERSION: int = 1
CACHE_TEMP_PREFIX: str = ".cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
