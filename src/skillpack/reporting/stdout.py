"""Human-readable stdout rendering of validation results."""

from __future__ import annotations

from skillpack.constants.reporting import (
    ANSI_BOLD,
    ANSI_RESET,
    SEVERITY_COLORS,
    SEVERITY_LABELS,
    STATUS_COLORS,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_WARN,
)
from skillpack.model import DocumentReport, Finding, ValidationReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class ValidationReporter:
    """Formats a validation report as one block per document plus a summary."""

    def __init__(self, report: ValidationReport, *, color: bool = True) -> None:
        self._report = report
        self._color = color

    def render(self) -> str:
        """Render the full report as a single string."""
        lines: list[str] = []
        for document in self._report.documents:
            lines.extend(self._render_document(document))
        lines.append("")
        lines.append(self._render_summary())
        return "\n".join(lines)

    def _render_document(self, document: DocumentReport) -> list[str]:
        status = document.status
        status_text = _colorize(status, STATUS_COLORS[status]) if self._color else status
        if status == STATUS_OK:
            return [f"{document.label}  {status_text}"]
        lines = [f"{document.label}  {status_text}"]
        for finding in (*document.errors, *document.warnings):
            lines.append(f"  {self._severity(finding)}  [{finding.rule_id}] {finding.message}")
        return lines

    def _severity(self, finding: Finding) -> str:
        label = SEVERITY_LABELS.get(finding.severity, finding.severity)
        color = SEVERITY_COLORS.get(finding.severity, "")
        return _colorize(label, color) if self._color and color else label

    def _render_summary(self) -> str:
        r = self._report
        summary = (
            f"{r.count(STATUS_OK)} passed  {r.count(STATUS_WARN)} warnings  {r.count(STATUS_FAIL)} failed"
        )
        return _colorize(summary, ANSI_BOLD) if self._color else summary
