"""Defaults for scaffolding new skill documents."""

from __future__ import annotations

DEFAULT_SKILL_VERSION: str = "1.0.0"
TRIGGER_PREFIX: str = "Trigger: When"
SCAFFOLD_TEMP_PREFIX: str = ".tmp-skill-"
SCAFFOLD_TEMP_SUFFIX: str = ".md"
NEW_CATEGORY_CHOICES: frozenset[str] = frozenset({"n", "N"})
