"""Detached process launching and browser command resolution."""

from __future__ import annotations

import logging
import os
import platform
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from typing import Protocol

from autopass.config import AutopassConfig
from autopass.constants.platform import BROWSER_ENV, FALLBACK_OPENER, PLATFORM_OPENERS

logger = logging.getLogger(__name__)


class Launcher(Protocol):
    """Starts an external program without waiting for it."""

    def launch(self, argv: Sequence[str]) -> None: ...


class DetachedLauncher:
    """Spawn a process in its own session with stdio discarded."""

    def launch(self, argv: Sequence[str]) -> None:
        logger.debug("Launching %s", argv[0])
        subprocess.Popen(  # noqa: S603
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )


def browser_command(
    config: AutopassConfig,
    environ: Mapping[str, str] | None = None,
    system: str | None = None,
) -> list[str]:
    """Resolve the browser argv prefix: ``$BROWSER``, then config, then the platform opener."""
    env = os.environ if environ is None else environ
    override = env.get(BROWSER_ENV, "").strip()
    if override:
        return shlex.split(override)
    if config.browser:
        return shlex.split(config.browser)
    return list(PLATFORM_OPENERS.get(system or platform.system(), FALLBACK_OPENER))
