"""Parsing-related exceptions."""

from __future__ import annotations

from skillpack.exceptions.base import SkillpackError


class MalformedDocument(SkillpackError, ValueError):
    """Raised when a SKILL.md frontmatter block is missing or unterminated."""
