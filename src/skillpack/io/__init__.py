"""Shared file I/O helpers."""

from .json_io import write_json_atomic, write_text_atomic
from .links import child_path, remove_entry, replace_with_symlink

__all__ = ["child_path", "remove_entry", "replace_with_symlink", "write_json_atomic", "write_text_atomic"]
