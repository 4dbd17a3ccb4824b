"""Config loading and normalization for Autopass."""

from __future__ import annotations

from pathlib import Path

import yaml

from autopass.config.model import AutopassConfig, default_password_store
from autopass.constants.config import (
    CACHE_PATH,
    CONFIG_ALLOWED_KEYS,
    CONFIG_DIR,
    CONFIG_FILENAME,
    DEFAULT_PASSWORD_KEY,
)
from autopass.exceptions import ConfigError


def default_config_path() -> Path:
    """Return the per-user config file location."""
    return (CONFIG_DIR / CONFIG_FILENAME).expanduser()


def load_config(config_path: Path | None = None) -> AutopassConfig:
    """Load and validate autopass config from ``config.yml`` or an explicit path."""
    path = config_path.expanduser().resolve() if config_path else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return AutopassConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    password_key = raw.get("password_key", DEFAULT_PASSWORD_KEY)
    if not isinstance(password_key, str) or not password_key.strip():
        raise ConfigError("password_key must be a non-empty string")

    browser = raw.get("browser")
    if browser is not None and (not isinstance(browser, str) or not browser.strip()):
        raise ConfigError("browser must be a non-empty string")

    return AutopassConfig(
        password_store=_ensure_path(raw.get("password_store"), "password_store") or default_password_store(),
        password_key=password_key,
        browser=browser,
        cache_file=_ensure_path(raw.get("cache_file"), "cache_file") or CACHE_PATH.expanduser(),
    )


def _ensure_path(value: object, key: str) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty path string")
    return Path(value).expanduser()
