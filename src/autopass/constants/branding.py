"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "autopass"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: work with a single password store entry"
