"""Frozen dataclasses shared across skillpack subsystems."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from skillpack.constants.reporting import STATUS_FAIL, STATUS_OK, STATUS_WARN
from skillpack.constants.validation import SEVERITY_ERROR, SEVERITY_WARNING
from skillpack.types import DocumentStatus, Frontmatter, Severity


@dataclass(frozen=True)
class SkillRecord:
    """One discoverable skill.

    ``source_path`` points at the originating document (local mode) or its
    URL (remote mode). It is never serialized and does not take part in
    equality, so a record read back from a registry compares equal to the
    scanned record it was built from.
    """

    category: str
    name: str
    description: str = ""
    version: str | None = None
    scope: str | None = None
    source_path: str | None = field(default=None, compare=False)

    @property
    def key(self) -> tuple[str, str]:
        """Registry uniqueness key."""
        return (self.category, self.name)


@dataclass(frozen=True)
class SplitDocument:
    """Raw header/body split of a document, before field extraction."""

    lines: tuple[str, ...]
    header_lines: tuple[str, ...]
    body_lines: tuple[str, ...]
    opened: bool
    closed: bool

    @property
    def body_start_line(self) -> int:
        """1-based line number where the body begins."""
        return len(self.lines) - len(self.body_lines) + 1


@dataclass(frozen=True)
class ParsedSkillDocument:
    """A SKILL.md split into frontmatter fields and markdown body."""

    file_path: Path | None
    raw_text: str
    frontmatter: Frontmatter
    body: str
    body_start_line: int


@dataclass(frozen=True)
class ScanError:
    """Per-skill failure surfaced by the scanner without aborting the scan."""

    path: Path
    category: str
    name: str
    message: str


@dataclass(frozen=True)
class ScanResult:
    """Records discovered under a skills root plus collected per-skill errors."""

    root: Path
    records: tuple[SkillRecord, ...]
    errors: tuple[ScanError, ...] = ()


@dataclass(frozen=True)
class Finding:
    """A single validation finding."""

    rule_id: str
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == SEVERITY_ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity == SEVERITY_WARNING

    def format(self) -> str:
        """Format as ``severity [rule-id] message``."""
        return f"{self.severity} [{self.rule_id}] {self.message}"


@dataclass(frozen=True)
class DocumentReport:
    """Validation outcome for one document."""

    path: Path
    category: str
    name: str
    findings: tuple[Finding, ...]

    @property
    def errors(self) -> tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.is_error)

    @property
    def warnings(self) -> tuple[Finding, ...]:
        return tuple(finding for finding in self.findings if finding.is_warning)

    @property
    def status(self) -> DocumentStatus:
        if self.errors:
            return STATUS_FAIL
        if self.warnings:
            return STATUS_WARN
        return STATUS_OK

    @property
    def label(self) -> str:
        return f"{self.category}/{self.name}"


@dataclass(frozen=True)
class ValidationReport:
    """Validation outcome for a batch of documents."""

    documents: tuple[DocumentReport, ...]

    @property
    def passed(self) -> bool:
        """True iff no document carries an error-severity finding."""
        return all(not document.errors for document in self.documents)

    def count(self, status: DocumentStatus) -> int:
        return sum(1 for document in self.documents if document.status == status)


@dataclass(frozen=True)
class FailedInstall:
    """A skill that could not be materialized."""

    name: str
    reason: str


@dataclass(frozen=True)
class InstallResult:
    """Outcome of one installer run."""

    destination: Path | None
    category: str | None = None
    installed: tuple[str, ...] = ()
    failed: tuple[FailedInstall, ...] = ()
    cancelled: bool = False

    @property
    def skipped_count(self) -> int:
        return len(self.failed)


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of creating a new skill document."""

    record: SkillRecord
    path: Path
    findings: tuple[Finding, ...]
    registry_refreshed: bool = False

    @property
    def has_errors(self) -> bool:
        return any(finding.is_error for finding in self.findings)
