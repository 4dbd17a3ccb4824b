"""Reporting of non-fatal problems to the user."""

from __future__ import annotations

import logging
from typing import Protocol

from autopass.constants.entry import MASKED_SECRET
from autopass.constants.platform import NOTIFY_APP_NAME, NOTIFY_SEND_EXECUTABLE
from autopass.launcher import DetachedLauncher, Launcher
from autopass.types import NotifyContext

logger = logging.getLogger(__name__)

# Context keys that are never written out verbatim.
SECRET_CONTEXT_KEYS: frozenset[str] = frozenset({"secret_line"})


class Notifier(Protocol):
    """Fire-and-forget sink for user-facing warnings."""

    def notify(self, message: str, context: NotifyContext | None = None) -> None: ...


class LogNotifier:
    """Report through ``logging``; context goes to DEBUG with secrets masked."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, message: str, context: NotifyContext | None = None) -> None:
        self._log.warning(message)
        if context:
            for key, value in sorted(mask_context(context).items()):
                self._log.debug("%s: %s", key, value)


class DesktopNotifier(LogNotifier):
    """Log the message and also pop up a desktop notification via ``notify-send``."""

    def __init__(self, launcher: Launcher | None = None, log: logging.Logger | None = None) -> None:
        super().__init__(log)
        self._launcher = launcher or DetachedLauncher()

    def notify(self, message: str, context: NotifyContext | None = None) -> None:
        super().notify(message, context)
        try:
            self._launcher.launch([NOTIFY_SEND_EXECUTABLE, NOTIFY_APP_NAME, message])
        except OSError as exc:
            self._log.debug("Desktop notification unavailable: %s", exc)


def mask_context(context: NotifyContext) -> dict[str, str]:
    """Return a copy of ``context`` with secret values replaced."""
    return {key: (MASKED_SECRET if key in SECRET_CONTEXT_KEYS and value else value) for key, value in context.items()}
