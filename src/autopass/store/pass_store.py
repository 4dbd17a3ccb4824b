"""``pass`` command backed secret store."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

from autopass.constants.config import PASSWORD_STORE_ENV
from autopass.constants.platform import PASS_EXECUTABLE
from autopass.exceptions import StoreAccessError

logger = logging.getLogger(__name__)


class SecretStore(Protocol):
    """Returns the decrypted content of an entry by name."""

    def show(self, name: str) -> str: ...


class PassStore:
    """Decrypt entries with ``pass show <name>``.

    The call blocks until ``pass`` exits. ``timeout`` is ``None`` by default,
    so a hanging gpg-agent prompt hangs the caller.
    """

    def __init__(
        self,
        password_store: Path | None = None,
        *,
        executable: str = PASS_EXECUTABLE,
        timeout: float | None = None,
    ) -> None:
        self._password_store = password_store
        self._executable = executable
        self._timeout = timeout

    def show(self, name: str) -> str:
        env = dict(os.environ)
        if self._password_store is not None:
            env[PASSWORD_STORE_ENV] = str(self._password_store)

        logger.debug("Decrypting entry %s", name)
        try:
            result = subprocess.run(  # noqa: S603
                [self._executable, "show", name],
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
                env=env,
            )
        except FileNotFoundError as exc:
            raise StoreAccessError(f"`{self._executable}` command not found") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise StoreAccessError(f"Failed to decrypt entry '{name}': {detail}") from exc
        except subprocess.TimeoutExpired as exc:
            raise StoreAccessError(f"Timed out decrypting entry '{name}'") from exc
        return result.stdout
