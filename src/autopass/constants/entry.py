"""Constants used by entries, checksums, and content parsing."""

from __future__ import annotations

ENCRYPTED_SUFFIX: str = ".gpg"
FILE_HASH_CHUNK_SIZE: int = 65536

PATH_ATTRIBUTE: str = "path"
NAME_ATTRIBUTE: str = "name"
URL_ATTRIBUTE: str = "url"
WINDOW_ATTRIBUTE: str = "window"

# Replaces the parsed attributes when decrypted content is malformed.
ERROR_ATTRIBUTE: str = "error"
MASKED_SECRET: str = "********"
