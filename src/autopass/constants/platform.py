"""Constants for external process launches."""

from __future__ import annotations

BROWSER_ENV: str = "BROWSER"

# Default URL openers keyed by ``platform.system()``.
PLATFORM_OPENERS: dict[str, tuple[str, ...]] = {
    "Darwin": ("open",),
    "Windows": ("cmd", "/c", "start", ""),
}
FALLBACK_OPENER: tuple[str, ...] = ("xdg-open",)

PASS_EXECUTABLE: str = "pass"
NOTIFY_SEND_EXECUTABLE: str = "notify-send"
NOTIFY_APP_NAME: str = "autopass"
