"""I/O exceptions for file and network operations."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class IOFailure(SkillpackError, OSError):
    """Raised when a file or network operation fails for non-content reasons."""
