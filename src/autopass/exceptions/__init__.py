"""Shared exception hierarchy for Autopass."""

from __future__ import annotations

from .base import AutopassError
from .config import ConfigError
from .entry import URLNotFoundError
from .parsing import EntryParseError
from .store import StoreAccessError

__all__ = [
    "AutopassError",
    "ConfigError",
    "EntryParseError",
    "StoreAccessError",
    "URLNotFoundError",
]
