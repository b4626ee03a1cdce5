"""Registry artifact codec and builder."""

from .builder import build_registry
from .codec import deserialize, dumps, load_registry_file, serialize, write_registry_file

__all__ = ["build_registry", "deserialize", "dumps", "load_registry_file", "serialize", "write_registry_file"]
