"""Common type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

# Decrypted entry metadata; YAML may produce dates and nested structures.
Attributes: TypeAlias = dict[str, Any]

# Diagnostic details passed along with a notification.
NotifyContext: TypeAlias = Mapping[str, str]
