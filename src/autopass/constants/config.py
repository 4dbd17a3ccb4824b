"""Configuration defaults and filenames."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME: str = "config.yml"
CONFIG_DIR: Path = Path("~/.config/autopass")
CACHE_PATH: Path = Path("~/.cache/autopass/cache.json")

PASSWORD_STORE_ENV: str = "PASSWORD_STORE_DIR"
DEFAULT_PASSWORD_STORE: Path = Path("~/.password-store")
DEFAULT_PASSWORD_KEY: str = "pass"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"password_store", "password_key", "browser", "cache_file"})
