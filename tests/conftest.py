"""Shared pytest fixtures and collaborator doubles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from autopass.config import AutopassConfig
from autopass.entry import EntryContext
from autopass.types import NotifyContext


class FakeStore:
    """SecretStore double that records every ``show`` call."""

    def __init__(self, content: str = "", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[str] = []

    def show(self, name: str) -> str:
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return self.content


class RecordingNotifier:
    """Notifier double that keeps every notification."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, str]]] = []

    def notify(self, message: str, context: NotifyContext | None = None) -> None:
        self.calls.append((message, dict(context or {})))


class RecordingLauncher:
    """Launcher double that records argv instead of spawning."""

    def __init__(self) -> None:
        self.launched: list[list[str]] = []

    def launch(self, argv: Sequence[str]) -> None:
        self.launched.append(list(argv))


@pytest.fixture()
def password_store(tmp_path: Path) -> Path:
    """Return an empty password store root."""
    root = tmp_path / "store"
    root.mkdir()
    return root


@pytest.fixture()
def config(password_store: Path, tmp_path: Path) -> AutopassConfig:
    """Return a config rooted at the temporary store."""
    return AutopassConfig(
        password_store=password_store,
        password_key="pass",
        cache_file=tmp_path / "cache.json",
    )


@pytest.fixture()
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture()
def context(
    config: AutopassConfig,
    fake_store: FakeStore,
    notifier: RecordingNotifier,
    launcher: RecordingLauncher,
) -> EntryContext:
    """Return an entry context wired to the recording doubles."""
    return EntryContext(config=config, store=fake_store, notifier=notifier, launcher=launcher)


@pytest.fixture()
def write_entry(password_store: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes an encrypted entry file under the store."""

    def _write(name: str, data: bytes = b"ciphertext") -> Path:
        path = password_store / f"{name}.gpg"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write
