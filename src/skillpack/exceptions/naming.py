"""Exceptions raised when creating skills."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class InvalidName(SkillpackError, ValueError):
    """Raised when a skill or category name fails the naming rule."""


class AlreadyExists(SkillpackError, FileExistsError):
    """Raised when a scaffold target already holds a SKILL.md."""
