"""Password store access exceptions."""

from __future__ import annotations

from autopass.exceptions.base import AutopassError


class StoreAccessError(AutopassError, OSError):
    """Raised when the password store command cannot produce an entry's content."""
