"""Password store entries."""

from .context import EntryContext
from .entry import Entry

__all__ = ["Entry", "EntryContext"]
