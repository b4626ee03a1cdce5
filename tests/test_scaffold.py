"""Tests for skill scaffolding."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest

from skillpack.exceptions import AlreadyExists, InvalidName
from skillpack.parsers import parse_skill_markdown_file
from skillpack.registry import load_registry_file
from skillpack.scaffold import check_name, create_skill, format_trigger, render_skill_document

CREATED = datetime.date(2026, 1, 15)


def test_created_skill_validates_without_errors(tmp_path: Path) -> None:
    result = create_skill(
        tmp_path / "skills",
        "react-native",
        "rn-gestures",
        description="Gesture handler patterns for React Native screens.",
        trigger="handling touch gestures",
        created=CREATED,
    )

    assert result.path == tmp_path / "skills" / "react-native" / "rn-gestures" / "SKILL.md"
    assert not result.has_errors
    assert [finding.rule_id for finding in result.findings] == ["placeholders"]
    parsed = parse_skill_markdown_file(result.path)
    assert parsed.frontmatter == {
        "name": "rn-gestures",
        "version": "1.0.0",
        "description": "Gesture handler patterns for React Native screens.",
        "scope": "react-native",
        "created": "2026-01-15",
    }
    assert "## Trigger: When handling touch gestures" in parsed.body


def test_short_description_is_reported_but_written(tmp_path: Path) -> None:
    result = create_skill(tmp_path, "misc", "tiny", description="Too short", trigger="x", created=CREATED)

    assert result.path.is_file()
    assert "description-length" in {finding.rule_id for finding in result.findings}


def test_description_whitespace_is_collapsed(tmp_path: Path) -> None:
    result = create_skill(
        tmp_path,
        "misc",
        "spaced",
        description="  Several   words\n across lines  ",
        trigger="x",
        created=CREATED,
    )

    assert result.record.description == "Several words across lines"


@pytest.mark.parametrize(
    ("category", "name"),
    [("react-native", "Rn_Animations"), ("React", "ok-name"), ("misc", "a" * 65), ("misc", "double--hyphen")],
    ids=["bad-name", "bad-category", "too-long", "double-hyphen"],
)
def test_invalid_names_are_rejected(tmp_path: Path, category: str, name: str) -> None:
    with pytest.raises(InvalidName):
        create_skill(tmp_path, category, name, description="d", trigger="t")

    assert list(tmp_path.iterdir()) == []


def test_existing_skill_is_not_overwritten(tmp_path: Path) -> None:
    create_skill(tmp_path, "misc", "once", description="first description here", trigger="t", created=CREATED)

    with pytest.raises(AlreadyExists):
        create_skill(tmp_path, "misc", "once", description="second", trigger="t")

    assert "first description here" in (tmp_path / "misc" / "once" / "SKILL.md").read_text(encoding="utf-8")


def test_overwrite_replaces_existing_skill(tmp_path: Path) -> None:
    create_skill(tmp_path, "misc", "once", description="first", trigger="t", created=CREATED)

    result = create_skill(tmp_path, "misc", "once", description="second", trigger="t", overwrite=True)

    assert "description: second" in result.path.read_text(encoding="utf-8")


def test_registry_is_refreshed_with_new_skill(repo_copy: Path) -> None:
    registry_path = repo_copy / "registry.json"

    result = create_skill(
        repo_copy / "skills",
        "angular",
        "ng-c",
        description="Angular routing guards and resolvers.",
        trigger="adding routes",
        registry_path=registry_path,
    )

    assert result.registry_refreshed is True
    keys = [record.key for record in load_registry_file(registry_path)]
    assert keys == [("angular", "ng-a"), ("angular", "ng-b"), ("angular", "ng-c"), ("react-native", "rn-animations")]


@pytest.mark.parametrize(
    ("condition", "expected"),
    [
        ("reviewing code", "Trigger: When reviewing code"),
        ("When reviewing code", "Trigger: When reviewing code"),
        ("  spaced   out ", "Trigger: When spaced out"),
    ],
)
def test_format_trigger(condition: str, expected: str) -> None:
    assert format_trigger(condition) == expected


def test_check_name_returns_valid_value() -> None:
    assert check_name("rn-animations") == "rn-animations"


def test_template_leaves_no_unfilled_markers() -> None:
    text = render_skill_document(
        name="x",
        version="1.0.0",
        description="d",
        scope="s",
        created="2026-01-01",
        trigger="Trigger: When t",
    )

    assert "$" not in text
    assert text.startswith("---\nname: x\n")
