"""Parsing-related exceptions."""

from __future__ import annotations

from autopass.exceptions.base import AutopassError


class EntryParseError(AutopassError, ValueError):
    """Raised when decrypted entry content cannot be parsed."""
