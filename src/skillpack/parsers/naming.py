"""Skill and category name checks."""

from __future__ import annotations

from skillpack.constants.naming import NAME_MAX_LENGTH, NAME_PATTERN


def is_valid_name(value: str) -> bool:
    """True when *value* is a lowercase hyphenated name of allowed length."""
    return bool(value) and len(value) <= NAME_MAX_LENGTH and NAME_PATTERN.match(value) is not None
