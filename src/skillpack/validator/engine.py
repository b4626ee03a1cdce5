"""Run the rule set over one document or a whole skills tree."""

from __future__ import annotations

import logging
from pathlib import Path

from skillpack.config.model import ValidationPolicy
from skillpack.constants.validation import RULE_IO_READ, SEVERITY_ERROR
from skillpack.exceptions import IOFailure
from skillpack.model import DocumentReport, Finding, SkillRecord, ValidationReport
from skillpack.parsers import read_document, split_document
from skillpack.scanner import discover_skill_files
from skillpack.validator.rules import RULES, RuleContext

logger = logging.getLogger(__name__)


def validate_skill(record: SkillRecord, text: str, policy: ValidationPolicy | None = None) -> list[Finding]:
    """Return every finding for *text*, the document behind *record*.

    Content problems are reported as findings; this never raises for them.
    """
    ctx = RuleContext(record=record, split=split_document(text), policy=policy or ValidationPolicy())
    findings: list[Finding] = []
    for rule in RULES:
        findings.extend(rule(ctx))
    return findings


def validate_file(path: Path, policy: ValidationPolicy | None = None) -> DocumentReport:
    """Validate one ``SKILL.md``; category and folder come from its location.

    Raises:
        IOFailure: the document cannot be read.
    """
    text = read_document(path)
    record = _record_for_path(path)
    findings = validate_skill(record, text, policy)
    return DocumentReport(path=path, category=record.category, name=record.name, findings=tuple(findings))


def validate_tree(root: Path, policy: ValidationPolicy | None = None) -> ValidationReport:
    """Validate every discovered document under *root*, continuing past unreadable ones."""
    documents: list[DocumentReport] = []
    for path in discover_skill_files(root):
        try:
            documents.append(validate_file(path, policy))
        except IOFailure as exc:
            logger.warning("Cannot validate %s: %s", path, exc)
            record = _record_for_path(path)
            documents.append(
                DocumentReport(
                    path=path,
                    category=record.category,
                    name=record.name,
                    findings=(Finding(rule_id=RULE_IO_READ, severity=SEVERITY_ERROR, message=str(exc)),),
                )
            )
    return ValidationReport(documents=tuple(documents))


def _record_for_path(path: Path) -> SkillRecord:
    resolved = path.resolve()
    return SkillRecord(
        category=resolved.parent.parent.name,
        name=resolved.parent.name,
        source_path=str(resolved.parent),
    )
