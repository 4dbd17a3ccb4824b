"""Base exception for Autopass."""

from __future__ import annotations


class AutopassError(Exception):
    """Base class for all Autopass errors."""
