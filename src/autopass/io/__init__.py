"""Shared file I/O helpers."""

from .files import file_checksum, file_md5
from .json_io import load_json_file, to_json_text, write_json_atomic

__all__ = ["file_checksum", "file_md5", "load_json_file", "to_json_text", "write_json_atomic"]
