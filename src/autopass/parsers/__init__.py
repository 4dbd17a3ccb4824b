"""Parsers for decrypted entry content."""

from .entry_content import ParsedContent, parse_entry_content

__all__ = ["ParsedContent", "parse_entry_content"]
