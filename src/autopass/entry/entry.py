"""A single entry in the password store."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from autopass.constants.entry import (
    ENCRYPTED_SUFFIX,
    ERROR_ATTRIBUTE,
    NAME_ATTRIBUTE,
    PATH_ATTRIBUTE,
    URL_ATTRIBUTE,
    WINDOW_ATTRIBUTE,
)
from autopass.entry.context import EntryContext
from autopass.exceptions import URLNotFoundError
from autopass.io import file_checksum, to_json_text
from autopass.launcher import browser_command
from autopass.parsers import parse_entry_content
from autopass.types import Attributes, EntrySnapshot

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class Entry:
    """An encrypted file in the store plus its lazily decrypted attributes.

    Identity is ``(checksum, path)``: two entries for the same unchanged file
    compare equal whether or not either has been decrypted.
    """

    def __init__(
        self,
        name: str,
        path: Path | str,
        checksum: str | None = _UNSET,
        user_attributes: Mapping[str, Any] | None = None,
        decrypted: bool = False,
        *,
        context: EntryContext | None = None,
    ) -> None:
        self.name = name
        self.path = Path(path)
        self.checksum: str | None = self._calculate_checksum() if checksum is _UNSET else checksum
        self.decrypted = decrypted
        self._context = context or EntryContext()
        self._attributes: Attributes = {**(user_attributes or {}), PATH_ATTRIBUTE: self.path}

    @classmethod
    def load(cls, file_path: Path, context: EntryContext | None = None) -> Entry:
        """Build an undecrypted entry for an encrypted file inside the store."""
        context = context or EntryContext()
        name = Path(file_path).relative_to(context.config.password_store).as_posix()
        if name.endswith(ENCRYPTED_SUFFIX):
            name = name[: -len(ENCRYPTED_SUFFIX)]
        return cls(name=name, path=file_path, context=context)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        context: EntryContext | None = None,
        decrypted: bool = False,
    ) -> Entry:
        """Restore an entry from :meth:`to_dict` output without decrypting it."""
        kwargs: dict[str, Any] = {
            "name": data["name"],
            "path": data["path"],
            "user_attributes": data.get("user_attributes") or {},
            "decrypted": decrypted,
        }
        if "checksum" in data:
            kwargs["checksum"] = data["checksum"]
        return cls(**kwargs, context=context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.checksum == other.checksum and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.checksum, self.path))

    def __repr__(self) -> str:
        return f"Entry(name={self.name!r}, path={str(self.path)!r}, decrypted={self.decrypted})"

    @property
    def attributes(self) -> Attributes:
        """A copy of the current attributes; always contains ``"path"``."""
        return dict(self._attributes)

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    @property
    def url(self) -> str | None:
        return _non_empty(self.get(URL_ATTRIBUTE))

    @property
    def window(self) -> str | None:
        return _non_empty(self.get(WINDOW_ATTRIBUTE))

    @property
    def has_error(self) -> bool:
        return self.get(ERROR_ATTRIBUTE) is True

    def to_dict(self) -> EntrySnapshot:
        return {
            "name": self.name,
            "path": str(self.path),
            "checksum": self.checksum,
            "user_attributes": {**self._attributes, PATH_ATTRIBUTE: str(self.path)},
        }

    def to_json(self) -> str:
        return to_json_text(self.to_dict())

    def exists(self) -> bool:
        return self.path.exists()

    def decrypt(self) -> None:
        """Load attributes from the store unless already decrypted.

        Malformed content never raises: it is reported through the notifier
        and leaves ``{"error": True}`` as the attributes. Store failures
        propagate as :class:`~autopass.exceptions.StoreAccessError`.
        """
        if self.decrypted:
            return
        content = self._context.store.show(self.name)
        self._attributes = {**self._parse_content(content), PATH_ATTRIBUTE: self.path}
        self.name = _non_empty(self._attributes.get(NAME_ATTRIBUTE)) or self.name
        self.decrypted = True

    def reload(self) -> None:
        """Decrypt again if the file changed since the last checksum."""
        checksum = self._calculate_checksum()
        if checksum == self.checksum and self.decrypted:
            return
        logger.debug("Entry %s changed, reloading", self.name)
        self.checksum = checksum
        self.decrypted = False
        self.decrypt()

    def match(self, window_title: str) -> re.Match[str] | None:
        """Return a match if this entry applies to a window with ``window_title``.

        The explicit ``window`` attribute is used as a regex; otherwise the url
        and then the last segment of the name are matched literally.
        """
        basename = PurePosixPath(self.name).name
        window = self.window
        if window is not None:
            try:
                return re.search(window, window_title, re.IGNORECASE)
            except re.error as exc:
                logger.warning("Invalid window pattern for entry '%s': %s", self.name, exc)
                pattern = re.escape(window)
        else:
            pattern = re.escape(self.url or basename)
        return re.search(pattern, window_title, re.IGNORECASE)

    def open_url(self) -> None:
        """Open the entry's url in a browser without waiting for it."""
        url = self.url
        if url is None:
            raise URLNotFoundError()
        argv = [*browser_command(self._context.config), url]
        logger.info("Opening url for entry %s", self.name)
        self._context.launcher.launch(argv)

    def _calculate_checksum(self) -> str | None:
        return file_checksum(self.path)

    def _parse_content(self, content: str) -> Attributes:
        parsed = parse_entry_content(content, password_key=self._context.config.password_key)
        if parsed.metadata is not None:
            return parsed.metadata

        self._context.notifier.notify(
            f"Failed parsing entry '{self.name}': {parsed.error}",
            {
                "secret_line": parsed.secret_line,
                "attribute_block": parsed.attribute_block,
                "error": str(parsed.error),
            },
        )
        return {ERROR_ATTRIBUTE: True}


def _non_empty(value: object) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None
