"""Discovery of ``<category>/<skill>/SKILL.md`` documents and record building."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from skillpack.constants.discovery import HIDDEN_PREFIX, SKILL_MARKDOWN_FILENAME
from skillpack.constants.naming import NAME_HINT
from skillpack.exceptions import IOFailure, RegistryUnavailable
from skillpack.model import ScanError, ScanResult, SkillRecord
from skillpack.parsers import extract_fields, is_valid_name, read_document, split_document

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path) -> list[Path]:
    """Return every ``SKILL.md`` two levels below *root*, in lexicographic order."""
    paths: list[Path] = []
    for category_dir in _sorted_subdirs(root):
        for skill_dir in _sorted_subdirs(category_dir):
            candidate = skill_dir / SKILL_MARKDOWN_FILENAME
            if candidate.is_file():
                paths.append(candidate)
    return paths


def list_categories(root: Path) -> list[tuple[str, int]]:
    """Return ``(category, skill_count)`` for every category directory under *root*."""
    if not root.is_dir():
        return []
    return [(category_dir.name, len(_sorted_subdirs(category_dir))) for category_dir in _sorted_subdirs(root)]


def iter_skill_records(root: Path, errors: list[ScanError] | None = None) -> Iterator[SkillRecord]:
    """Yield one record per discovered skill document.

    Per-skill failures never abort the scan. A document with a malformed
    header still yields a best-effort record built from whatever fields
    could be read; an unreadable document, or one whose category or skill
    directory breaks the naming rule, is skipped. Every case is appended to
    *errors* when a list is supplied.
    """
    if not root.is_dir():
        raise RegistryUnavailable(f"Skills directory does not exist: {root}")

    for path in discover_skill_files(root):
        category = path.parent.parent.name
        name = path.parent.name
        if not (is_valid_name(category) and is_valid_name(name)):
            logger.warning("Skipping %s/%s: directory names must use %s", category, name, NAME_HINT)
            message = f"invalid name; use {NAME_HINT}"
            _report(errors, ScanError(path=path, category=category, name=name, message=message))
            continue
        try:
            text = read_document(path)
        except IOFailure as exc:
            logger.warning("Skipping unreadable skill %s/%s: %s", category, name, exc)
            _report(errors, ScanError(path=path, category=category, name=name, message=str(exc)))
            continue

        split = split_document(text)
        if not split.opened or not split.closed:
            problem = "missing opening delimiter" if not split.opened else "unterminated frontmatter"
            logger.warning("Malformed frontmatter in %s: %s", path, problem)
            _report(errors, ScanError(path=path, category=category, name=name, message=problem))

        fields = extract_fields(split.header_lines)
        yield SkillRecord(
            category=category,
            name=name,
            description=fields.get("description", ""),
            version=fields.get("version") or fields.get("metadata.version") or None,
            scope=fields.get("scope") or fields.get("metadata.scope") or None,
            source_path=str(path.parent),
        )


def scan_skills(root: Path) -> ScanResult:
    """Scan *root* eagerly and return records plus collected errors."""
    errors: list[ScanError] = []
    records = tuple(iter_skill_records(root, errors))
    logger.info("Scanned %d skills under %s (%d errors)", len(records), root, len(errors))
    return ScanResult(root=root, records=records, errors=tuple(errors))


def _sorted_subdirs(directory: Path) -> list[Path]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.warning("Cannot list %s: %s", directory, exc)
        return []
    return sorted(
        (entry for entry in entries if entry.is_dir() and not entry.name.startswith(HIDDEN_PREFIX)),
        key=lambda entry: entry.name,
    )


def _report(errors: list[ScanError] | None, error: ScanError) -> None:
    if errors is not None:
        errors.append(error)
