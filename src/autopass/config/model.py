"""Config data model for Autopass."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from autopass.constants.config import (
    CACHE_PATH,
    DEFAULT_PASSWORD_KEY,
    DEFAULT_PASSWORD_STORE,
    PASSWORD_STORE_ENV,
)


def default_password_store() -> Path:
    """Resolve the store root the same way ``pass`` does."""
    override = os.environ.get(PASSWORD_STORE_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_PASSWORD_STORE.expanduser()


@dataclass(frozen=True)
class AutopassConfig:
    """Resolved autopass config."""

    password_store: Path = field(default_factory=default_password_store)
    password_key: str = DEFAULT_PASSWORD_KEY
    browser: str | None = None
    cache_file: Path = field(default_factory=CACHE_PATH.expanduser)
