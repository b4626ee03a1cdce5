"""Registry load and decode exceptions."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class RegistryCorrupt(SkillpackError, ValueError):
    """Raised when a registry artifact does not have the expected shape."""


class RegistryUnavailable(SkillpackError):
    """Raised when no registry source could be loaded."""
