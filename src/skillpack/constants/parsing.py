"""Constants for frontmatter parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
BOM: str = "\ufeff"

FIELD_LINE_PATTERN: Pattern[str] = re.compile(r"^([A-Za-z0-9_.-]+)\s*:(?:\s+(.*)|\s*)$")
NESTED_FIELD_LINE_PATTERN: Pattern[str] = re.compile(r"^[ \t]+([A-Za-z0-9_.-]+)\s*:(?:\s+(.*)|\s*)$")
BLOCK_SCALAR_MARKERS: frozenset[str] = frozenset({">", ">-", ">+", "|", "|-", "|+"})
COMMENT_PREFIX: str = "#"
QUOTE_CHARS: tuple[str, ...] = ('"', "'")
