"""Parser for decrypted ``pass`` content: a secret line followed by YAML metadata."""

from __future__ import annotations

from dataclasses import dataclass

import yaml

from autopass.exceptions import EntryParseError
from autopass.types import Attributes


@dataclass(frozen=True)
class ParsedContent:
    """Outcome of parsing decrypted content.

    Exactly one of ``metadata`` and ``error`` is set. The raw pieces are kept
    for diagnostics when parsing failed.
    """

    secret_line: str
    attribute_block: str
    metadata: Attributes | None = None
    error: EntryParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_entry_content(content: str, *, password_key: str) -> ParsedContent:
    """Split ``content`` into the secret and a YAML mapping of attributes.

    The first line is the secret and is stored under ``password_key``. The
    rest is loaded with ``yaml.safe_load``; an empty document yields ``{}``.
    Parse failures are returned, not raised.
    """
    secret_line, _, attribute_block = content.partition("\n")

    try:
        payload = yaml.safe_load(attribute_block) if attribute_block.strip() else None
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        return _failed(secret_line, attribute_block, f"Invalid YAML metadata: {exc}", exc)

    if payload is None:
        metadata: Attributes = {}
    elif isinstance(payload, dict):
        metadata = {str(key): value for key, value in payload.items()}
    else:
        return _failed(
            secret_line,
            attribute_block,
            f"Metadata must be a YAML mapping, got {type(payload).__name__}",
        )

    metadata[password_key] = secret_line
    return ParsedContent(secret_line=secret_line, attribute_block=attribute_block, metadata=metadata)


def _failed(
    secret_line: str,
    attribute_block: str,
    message: str,
    cause: Exception | None = None,
) -> ParsedContent:
    error = EntryParseError(message)
    error.__cause__ = cause
    return ParsedContent(secret_line=secret_line, attribute_block=attribute_block, error=error)
