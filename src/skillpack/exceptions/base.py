"""Root exception for skillpack."""

from __future__ import annotations


class SkillpackError(Exception):
    """Base class for all skillpack errors."""
