"""Skill and category naming rules."""

from __future__ import annotations

import re
from re import Pattern

NAME_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
NAME_MAX_LENGTH: int = 64
NAME_HINT: str = "lowercase letters, digits and single hyphens (e.g. rn-animations)"
