"""Create a new skill document from the canonical template."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path

from skillpack.config.model import ValidationPolicy
from skillpack.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillpack.constants.naming import NAME_HINT, NAME_MAX_LENGTH
from skillpack.constants.scaffold import (
    DEFAULT_SKILL_VERSION,
    SCAFFOLD_TEMP_PREFIX,
    SCAFFOLD_TEMP_SUFFIX,
    TRIGGER_PREFIX,
)
from skillpack.exceptions import AlreadyExists, IOFailure, InvalidName
from skillpack.io import write_text_atomic
from skillpack.model import ScaffoldResult, SkillRecord
from skillpack.parsers import is_valid_name
from skillpack.registry import build_registry
from skillpack.scaffold.template import render_skill_document
from skillpack.validator import validate_skill

logger = logging.getLogger(__name__)


def check_name(value: str, *, kind: str = "name") -> str:
    """Return *value* if it satisfies the naming rule, else raise ``InvalidName``."""
    if not is_valid_name(value):
        raise InvalidName(f"Invalid {kind} '{value}': use {NAME_HINT}, at most {NAME_MAX_LENGTH} characters")
    return value


def format_trigger(condition: str) -> str:
    """Build the ``Trigger: When <condition>`` clause."""
    condition = " ".join(condition.split())
    if condition.lower().startswith("when "):
        condition = condition[len("when ") :]
    return f"{TRIGGER_PREFIX} {condition}".rstrip()


def skill_path(skills_root: Path, category: str, name: str) -> Path:
    return skills_root / category / name / SKILL_MARKDOWN_FILENAME


def create_skill(
    skills_root: Path,
    category: str,
    name: str,
    *,
    description: str,
    trigger: str,
    version: str = DEFAULT_SKILL_VERSION,
    overwrite: bool = False,
    policy: ValidationPolicy | None = None,
    registry_path: Path | None = None,
    created: datetime.date | None = None,
) -> ScaffoldResult:
    """Write ``skills_root/category/name/SKILL.md`` and report on it.

    The new document is validated but findings never undo the write; they
    are returned for the caller to show. When *registry_path* is given the
    registry is rebuilt so the skill is immediately installable.

    Raises:
        InvalidName: *category* or *name* fails the naming rule.
        AlreadyExists: the document exists and *overwrite* is false.
        IOFailure: the document cannot be written.
    """
    check_name(category, kind="category")
    check_name(name)

    path = skill_path(skills_root, category, name)
    if path.exists() and not overwrite:
        raise AlreadyExists(f"'{category}/{name}' already exists at {path}")

    description = " ".join(description.split())
    content = render_skill_document(
        name=name,
        version=version,
        description=description,
        scope=category,
        created=(created or datetime.date.today()).isoformat(),
        trigger=format_trigger(trigger),
    )
    try:
        write_text_atomic(
            path=path,
            content=content,
            temp_prefix=SCAFFOLD_TEMP_PREFIX,
            temp_suffix=SCAFFOLD_TEMP_SUFFIX,
        )
    except OSError as exc:
        raise IOFailure(f"Cannot write {path}: {exc}") from exc
    logger.info("Created %s", path)

    record = SkillRecord(
        category=category,
        name=name,
        description=description,
        version=version,
        scope=category,
        source_path=str(path.parent),
    )
    findings = validate_skill(record, content, policy)

    refreshed = False
    if registry_path is not None:
        build_registry(skills_root, registry_path)
        refreshed = True

    return ScaffoldResult(record=record, path=path, findings=tuple(findings), registry_refreshed=refreshed)
