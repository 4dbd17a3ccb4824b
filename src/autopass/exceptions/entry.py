"""Entry action exceptions."""

from __future__ import annotations

from autopass.exceptions.base import AutopassError


class URLNotFoundError(AutopassError, LookupError):
    """Raised when an entry has no url to open."""

    def __init__(self, message: str = "No URL found for this entry") -> None:
        super().__init__(message)
