"""Constants for filesystem discovery of skill documents."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
HIDDEN_PREFIX: str = "."
