"""Collaborators an entry needs to decrypt, report and launch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import cast

from autopass.config import AutopassConfig
from autopass.launcher import DetachedLauncher, Launcher
from autopass.notify import LogNotifier, Notifier
from autopass.store import PassStore, SecretStore


@dataclass(frozen=True)
class EntryContext:
    """Shared, read-only services injected into entries.

    Without an explicit ``store``, entries decrypt with ``pass`` against
    ``config.password_store``.
    """

    config: AutopassConfig = field(default_factory=AutopassConfig)
    store: SecretStore = field(default=cast(SecretStore, None))
    notifier: Notifier = field(default_factory=LogNotifier)
    launcher: Launcher = field(default_factory=DetachedLauncher)

    def __post_init__(self) -> None:
        if self.store is None:
            object.__setattr__(self, "store", PassStore(self.config.password_store))
