"""Rule identifiers and thresholds for SKILL.md validation."""

from __future__ import annotations

import re
from re import Pattern

RULE_DELIMITER_START: str = "delimiter-start"
RULE_DELIMITER_CLOSE: str = "delimiter-close"
RULE_NAME_FORMAT: str = "name-format"
RULE_NAME_FOLDER_MATCH: str = "name-folder-match"
RULE_DESCRIPTION_PRESENT: str = "description-present"
RULE_DESCRIPTION_LENGTH: str = "description-length"
RULE_DESCRIPTION_TRIGGER: str = "description-trigger"
RULE_SCOPE_MATCH: str = "scope-match"
RULE_VERSION_FORMAT: str = "version-format"
RULE_HAS_SECTIONS: str = "has-sections"
RULE_PLACEHOLDERS: str = "placeholders"
RULE_IO_READ: str = "io-read"

ALL_RULE_IDS: tuple[str, ...] = (
    RULE_DELIMITER_START,
    RULE_DELIMITER_CLOSE,
    RULE_NAME_FORMAT,
    RULE_NAME_FOLDER_MATCH,
    RULE_DESCRIPTION_PRESENT,
    RULE_DESCRIPTION_LENGTH,
    RULE_DESCRIPTION_TRIGGER,
    RULE_SCOPE_MATCH,
    RULE_VERSION_FORMAT,
    RULE_HAS_SECTIONS,
    RULE_PLACEHOLDERS,
)

SEVERITY_ERROR: str = "error"
SEVERITY_WARNING: str = "warning"

# Older installers used 40 or 80; set description_min_length to match them.
DEFAULT_DESCRIPTION_MIN_LENGTH: int = 20
DEFAULT_STRICT_SCOPE: bool = True
DEFAULT_PLACEHOLDER_WARNINGS: bool = True

TRIGGER_KEYWORDS: tuple[str, ...] = ("trigger", "use when", "when user")
TRIGGER_BODY_PATTERN: Pattern[str] = re.compile(
    r"^(?:#{1,6}[ \t]*(?:trigger|when to use)\b|trigger:)",
    re.IGNORECASE | re.MULTILINE,
)
SECTION_HEADING_PATTERN: Pattern[str] = re.compile(r"^##(?!#)[ \t]+\S", re.MULTILINE)
SEMVER_PATTERN: Pattern[str] = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+$")
PLACEHOLDER_MARKER: str = "<!-- "
SCOPE_FIELDS: tuple[str, ...] = ("scope", "metadata.scope")
VERSION_FIELDS: tuple[str, ...] = ("version", "metadata.version")
RECOMMENDED_VERSION: str = "1.0.0"
