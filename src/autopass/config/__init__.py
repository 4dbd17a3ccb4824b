"""Configuration loading and normalization for Autopass."""

from __future__ import annotations

from autopass.config.loader import default_config_path, load_config
from autopass.config.model import AutopassConfig, default_password_store

__all__ = [
    "AutopassConfig",
    "default_config_path",
    "default_password_store",
    "load_config",
]
