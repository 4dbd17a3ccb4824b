"""Shared type aliases for Autopass."""

from .cache import CachePayload, EntrySnapshot
from .common import Attributes, NotifyContext

__all__ = [
    "Attributes",
    "CachePayload",
    "EntrySnapshot",
    "NotifyContext",
]
