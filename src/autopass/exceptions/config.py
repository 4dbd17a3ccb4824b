"""Configuration-related exceptions."""

from __future__ import annotations

from autopass.exceptions.base import AutopassError


class ConfigError(AutopassError, ValueError):
    """Raised when autopass configuration is invalid."""
