"""Individual SKILL.md validation rules.

Each rule inspects a :class:`RuleContext` and returns zero or more findings.
Rules are independent; the engine runs all of them so one pass reports every
problem in a document.
"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property

from skillpack.config.model import ValidationPolicy
from skillpack.constants.naming import NAME_HINT, NAME_MAX_LENGTH, NAME_PATTERN
from skillpack.constants.parsing import FRONTMATTER_DELIMITER
from skillpack.constants.validation import (
    PLACEHOLDER_MARKER,
    RECOMMENDED_VERSION,
    RULE_DELIMITER_CLOSE,
    RULE_DELIMITER_START,
    RULE_DESCRIPTION_LENGTH,
    RULE_DESCRIPTION_PRESENT,
    RULE_DESCRIPTION_TRIGGER,
    RULE_HAS_SECTIONS,
    RULE_NAME_FOLDER_MATCH,
    RULE_NAME_FORMAT,
    RULE_PLACEHOLDERS,
    RULE_SCOPE_MATCH,
    RULE_VERSION_FORMAT,
    SCOPE_FIELDS,
    SECTION_HEADING_PATTERN,
    SEMVER_PATTERN,
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    TRIGGER_BODY_PATTERN,
    TRIGGER_KEYWORDS,
    VERSION_FIELDS,
)
from skillpack.model import Finding, SkillRecord, SplitDocument
from skillpack.parsers import extract_fields
from skillpack.types import Frontmatter


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may look at for one document."""

    record: SkillRecord
    split: SplitDocument
    policy: ValidationPolicy

    @cached_property
    def fields(self) -> Frontmatter:
        return extract_fields(self.split.header_lines)

    @cached_property
    def header_text(self) -> str:
        return "\n".join(self.split.header_lines)

    @cached_property
    def body_text(self) -> str:
        return "\n".join(self.split.body_lines)

    @cached_property
    def section_text(self) -> str:
        """Body text, or the whole document when the header never closes."""
        if self.split.closed:
            return self.body_text
        return "\n".join(self.split.lines)

    def first_field(self, keys: tuple[str, ...]) -> str | None:
        for key in keys:
            value = self.fields.get(key)
            if value:
                return value
        return None


Rule: TypeAlias = Callable[[RuleContext], list[Finding]]


def _error(rule_id: str, message: str) -> Finding:
    return Finding(rule_id=rule_id, severity=SEVERITY_ERROR, message=message)


def _warning(rule_id: str, message: str) -> Finding:
    return Finding(rule_id=rule_id, severity=SEVERITY_WARNING, message=message)


def check_delimiter_start(ctx: RuleContext) -> list[Finding]:
    if ctx.split.opened:
        return []
    return [_error(RULE_DELIMITER_START, f"frontmatter must start on line 1 with {FRONTMATTER_DELIMITER}")]


def check_delimiter_close(ctx: RuleContext) -> list[Finding]:
    if any(line.rstrip() == FRONTMATTER_DELIMITER for line in ctx.split.lines[1:]):
        return []
    return [_error(RULE_DELIMITER_CLOSE, f"frontmatter not closed with {FRONTMATTER_DELIMITER}")]


def check_name_format(ctx: RuleContext) -> list[Finding]:
    name = ctx.fields.get("name", "")
    if not name:
        return [_error(RULE_NAME_FORMAT, "name: missing")]
    if len(name) > NAME_MAX_LENGTH:
        return [_error(RULE_NAME_FORMAT, f"name '{name}' exceeds {NAME_MAX_LENGTH} characters")]
    if not NAME_PATTERN.match(name):
        return [_error(RULE_NAME_FORMAT, f"name '{name}' is invalid; use {NAME_HINT}")]
    return []


def check_name_folder_match(ctx: RuleContext) -> list[Finding]:
    name = ctx.fields.get("name", "")
    if name and name != ctx.record.name:
        return [_error(RULE_NAME_FOLDER_MATCH, f"name '{name}' must match folder '{ctx.record.name}'")]
    return []


def check_description_present(ctx: RuleContext) -> list[Finding]:
    if "description" in ctx.fields:
        return []
    return [_error(RULE_DESCRIPTION_PRESENT, "description: field missing")]


def check_description_length(ctx: RuleContext) -> list[Finding]:
    description = ctx.fields.get("description")
    minimum = ctx.policy.description_min_length
    if description is None or len(description) >= minimum:
        return []
    return [
        _warning(
            RULE_DESCRIPTION_LENGTH,
            f"description too short ({len(description)} chars, min {minimum})",
        )
    ]


def check_description_trigger(ctx: RuleContext) -> list[Finding]:
    header = ctx.header_text.lower()
    if any(keyword in header for keyword in TRIGGER_KEYWORDS):
        return []
    if TRIGGER_BODY_PATTERN.search(ctx.body_text):
        return []
    return [_warning(RULE_DESCRIPTION_TRIGGER, "missing trigger clause in description or body")]


def check_scope_match(ctx: RuleContext) -> list[Finding]:
    category = ctx.record.category
    scope = ctx.first_field(SCOPE_FIELDS)
    if scope is None:
        return [_warning(RULE_SCOPE_MATCH, f"scope: missing, add 'scope: {category}'")]
    if scope.strip() == category:
        return []
    message = f"scope '{scope}' must match folder '{category}'"
    if ctx.policy.strict_scope:
        return [_error(RULE_SCOPE_MATCH, message)]
    return [_warning(RULE_SCOPE_MATCH, message)]


def check_version_format(ctx: RuleContext) -> list[Finding]:
    version = ctx.first_field(VERSION_FIELDS)
    if version is None:
        return [_warning(RULE_VERSION_FORMAT, f"version: missing (recommended: {RECOMMENDED_VERSION})")]
    if not SEMVER_PATTERN.match(version):
        return [_warning(RULE_VERSION_FORMAT, f"version '{version}' is not MAJOR.MINOR.PATCH")]
    return []


def check_has_sections(ctx: RuleContext) -> list[Finding]:
    if SECTION_HEADING_PATTERN.search(ctx.section_text):
        return []
    return [_warning(RULE_HAS_SECTIONS, "no '## ' section headings found")]


def check_placeholders(ctx: RuleContext) -> list[Finding]:
    if not ctx.policy.placeholder_warnings:
        return []
    count = sum(1 for line in ctx.split.lines if PLACEHOLDER_MARKER in line)
    if count == 0:
        return []
    return [_warning(RULE_PLACEHOLDERS, f"{count} placeholder(s) not filled in")]


RULES: tuple[Rule, ...] = (
    check_delimiter_start,
    check_delimiter_close,
    check_name_format,
    check_name_folder_match,
    check_description_present,
    check_description_length,
    check_description_trigger,
    check_scope_match,
    check_version_format,
    check_has_sections,
    check_placeholders,
)
