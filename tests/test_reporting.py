"""Tests for terminal reporters."""

from __future__ import annotations

from pathlib import Path

from skillpack.model import DocumentReport, Finding, ValidationReport
from skillpack.reporting import Console, ValidationReporter


def _report() -> ValidationReport:
    return ValidationReport(
        documents=(
            DocumentReport(path=Path("a/ok/SKILL.md"), category="a", name="ok", findings=()),
            DocumentReport(
                path=Path("a/bad/SKILL.md"),
                category="a",
                name="bad",
                findings=(
                    Finding(rule_id="name-format", severity="error", message="name: missing"),
                    Finding(rule_id="has-sections", severity="warning", message="no sections"),
                ),
            ),
        )
    )


def test_validation_reporter_plain_output() -> None:
    text = ValidationReporter(_report(), color=False).render()

    assert "a/ok" in text
    assert "[name-format] name: missing" in text
    assert "[has-sections] no sections" in text
    assert "\x1b[" not in text
    assert text.splitlines()[-1] == "1 passed  0 warnings  1 failed"


def test_validation_reporter_colors_when_enabled() -> None:
    assert "\x1b[" in ValidationReporter(_report(), color=True).render()


def test_console_writes_through_injected_writer() -> None:
    lines: list[str] = []
    console = Console(color=False, write=lines.append)

    console.done("Installed ng-a")
    console.warn("Failed: ng-b")
    console.line()

    assert lines[0].endswith("Installed ng-a")
    assert lines[1].endswith("Failed: ng-b")
    assert lines[2] == ""
    assert console.highlight("x") == "x"
