"""Tests for the installer flow."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from skillpack.exceptions import IOFailure, RegistryUnavailable, SkillpackError
from skillpack.installer import Installer, LocalSkillSource, list_installed
from skillpack.model import Registry, SkillRecord
from skillpack.reporting import Console
from skillpack.tui import SelectItem


class ScriptedSelector:
    """Returns queued answers and records what it was shown."""

    def __init__(self, *answers: tuple[int, ...]) -> None:
        self.answers = list(answers)
        self.shown: list[tuple[list[str], bool]] = []

    def __call__(self, items: Sequence[SelectItem], *, multi: bool, title: str | None = None) -> tuple[int, ...]:
        self.shown.append(([item.label for item in items], multi))
        return self.answers.pop(0)


class InterruptingSelector:
    def __call__(self, items: Sequence[SelectItem], *, multi: bool, title: str | None = None) -> tuple[int, ...]:
        raise KeyboardInterrupt


class StubSource:
    """In-memory source whose materialize can be told to fail for given names."""

    mode = "remote"
    location = "memory"

    def __init__(self, records: list[SkillRecord], failing: frozenset[str] = frozenset()) -> None:
        self.records = records
        self.failing = failing
        self.materialized: list[str] = []

    def load_registry(self) -> Registry:
        return Registry(self.records)

    def materialize(self, record: SkillRecord, destination_root: Path) -> Path:
        if record.name in self.failing:
            raise IOFailure(f"boom {record.name}")
        self.materialized.append(record.name)
        return destination_root / record.name


def _quiet_console(lines: list[str]) -> Console:
    return Console(color=False, write=lines.append)


def test_interactive_flow_installs_selected_skills(skills_root: Path, tmp_path: Path) -> None:
    selector = ScriptedSelector((0,), (0, 1))
    lines: list[str] = []
    installer = Installer(LocalSkillSource(skills_root), select=selector, console=_quiet_console(lines))
    destination = tmp_path / "project" / ".opencode" / "skills"

    result = installer.run(destination)

    assert selector.shown == [(["angular", "react-native"], False), (["ng-a", "ng-b"], True)]
    assert result.installed == ("ng-a", "ng-b")
    assert result.category == "angular"
    assert (destination / "ng-a").is_symlink()
    assert any("2 skill(s) installed, 0 skipped" in line for line in lines)
    assert any("git pull" in line for line in lines)


def test_category_selector_shows_skill_counts(skills_root: Path, tmp_path: Path) -> None:
    shown: list[list[str]] = []

    def _select(items: Sequence[SelectItem], *, multi: bool, title: str | None = None) -> tuple[int, ...]:
        shown.append([item.description for item in items])
        return ()

    installer = Installer(LocalSkillSource(skills_root), select=_select, console=_quiet_console([]))

    installer.run(tmp_path)

    assert shown == [["2 skills available", "1 skills available"]]


@pytest.mark.parametrize(
    "answers",
    [((),), ((1,), ())],
    ids=["no-category", "no-skills"],
)
def test_empty_selection_cancels_without_changes(
    skills_root: Path, tmp_path: Path, answers: tuple[tuple[int, ...], ...]
) -> None:
    destination = tmp_path / "dest"
    installer = Installer(LocalSkillSource(skills_root), select=ScriptedSelector(*answers), console=_quiet_console([]))

    result = installer.run(destination)

    assert result.cancelled is True
    assert result.installed == ()
    assert not destination.exists()


def test_interrupt_propagates_without_changes(skills_root: Path, tmp_path: Path) -> None:
    installer = Installer(LocalSkillSource(skills_root), select=InterruptingSelector(), console=_quiet_console([]))

    with pytest.raises(KeyboardInterrupt):
        installer.run(tmp_path / "dest")

    assert not (tmp_path / "dest").exists()


def test_explicit_category_and_names_skip_prompts(tmp_path: Path) -> None:
    source = StubSource([SkillRecord("angular", "ng-a"), SkillRecord("angular", "ng-b")])
    installer = Installer(source, select=ScriptedSelector(), console=_quiet_console([]))

    result = installer.run(tmp_path, category="angular", skill_names=("ng-b", "ng-b"))

    assert source.materialized == ["ng-b"]
    assert result.installed == ("ng-b",)


def test_install_all_takes_whole_category(tmp_path: Path) -> None:
    source = StubSource([SkillRecord("angular", "ng-a"), SkillRecord("angular", "ng-b"), SkillRecord("react", "r")])
    installer = Installer(source, select=ScriptedSelector(), console=_quiet_console([]))

    result = installer.run(tmp_path, category="angular", install_all=True)

    assert result.installed == ("ng-a", "ng-b")


@pytest.mark.parametrize(
    ("category", "names"),
    [("vue", ()), ("angular", ("ng-z",)), ("angular/ng-z", ()), ("all", ("ng-z",))],
    ids=["unknown-category", "unknown-skill", "unknown-qualified", "all-with-unknown"],
)
def test_unknown_category_or_skill_is_rejected(tmp_path: Path, category: str, names: tuple[str, ...]) -> None:
    installer = Installer(StubSource([SkillRecord("angular", "ng-a")]), console=_quiet_console([]))

    with pytest.raises(SkillpackError, match="Unknown"):
        installer.run(tmp_path, category=category, skill_names=names)


def _mixed_source() -> StubSource:
    return StubSource(
        [
            SkillRecord("angular", "ng-a"),
            SkillRecord("angular", "best-practices"),
            SkillRecord("react", "r"),
            SkillRecord("nestjs", "best-practices"),
        ]
    )


@pytest.mark.parametrize(
    ("category", "names", "expected"),
    [
        ("ng-a", (), ["ng-a"]),
        ("ng-a", ("r", "ng-a"), ["ng-a", "r"]),
        ("nestjs/best-practices", (), ["best-practices"]),
        ("r", ("angular/best-practices",), ["r", "best-practices"]),
    ],
    ids=["bare-name", "bare-names-deduplicated", "qualified", "mixed"],
)
def test_skill_references_install_without_prompts(
    tmp_path: Path, category: str, names: tuple[str, ...], expected: list[str]
) -> None:
    source = _mixed_source()
    selector = ScriptedSelector()
    installer = Installer(source, select=selector, console=_quiet_console([]))

    result = installer.run(tmp_path, category=category, skill_names=names)

    assert source.materialized == expected
    assert selector.shown == []
    assert result.installed == tuple(expected)


def test_bare_name_resolves_its_category(tmp_path: Path) -> None:
    installer = Installer(_mixed_source(), select=ScriptedSelector(), console=_quiet_console([]))

    assert installer.run(tmp_path, category="ng-a").category == "angular"
    assert installer.run(tmp_path, category="ng-a", skill_names=("r",)).category is None


def test_ambiguous_bare_name_is_rejected(tmp_path: Path) -> None:
    source = _mixed_source()
    installer = Installer(source, console=_quiet_console([]))

    with pytest.raises(SkillpackError, match="ambiguous.*angular/best-practices, nestjs/best-practices"):
        installer.run(tmp_path, category="best-practices")

    assert source.materialized == []


@pytest.mark.parametrize(
    ("category", "install_all"),
    [("all", False), (None, True), ("all", True)],
    ids=["all-keyword", "all-flag", "both"],
)
def test_whole_registry_install(tmp_path: Path, category: str | None, install_all: bool) -> None:
    source = _mixed_source()
    selector = ScriptedSelector()
    installer = Installer(source, select=selector, console=_quiet_console([]))

    result = installer.run(tmp_path, category=category, install_all=install_all)

    assert source.materialized == ["ng-a", "best-practices", "r", "best-practices"]
    assert selector.shown == []
    assert result.category is None


def test_category_named_all_takes_precedence(tmp_path: Path) -> None:
    source = StubSource([SkillRecord("all", "x"), SkillRecord("all", "y"), SkillRecord("react", "r")])
    installer = Installer(source, select=ScriptedSelector(), console=_quiet_console([]))

    result = installer.run(tmp_path, category="all", install_all=True)

    assert result.installed == ("x", "y")
    assert result.category == "all"


def test_failed_skill_does_not_stop_batch(tmp_path: Path) -> None:
    source = StubSource(
        [SkillRecord("angular", "ng-a"), SkillRecord("angular", "ng-b"), SkillRecord("angular", "ng-c")],
        failing=frozenset({"ng-b"}),
    )
    lines: list[str] = []
    installer = Installer(source, console=_quiet_console(lines))

    result = installer.run(tmp_path, category="angular", install_all=True)

    assert result.installed == ("ng-a", "ng-c")
    assert [failure.name for failure in result.failed] == ["ng-b"]
    assert result.skipped_count == 1
    assert any("2 skill(s) installed, 1 skipped" in line for line in lines)
    assert any("run the installer again" in line for line in lines)


def test_confirm_destination_can_redirect(tmp_path: Path) -> None:
    source = StubSource([SkillRecord("angular", "ng-a")])
    other = tmp_path / "other" / ".opencode" / "skills"
    installer = Installer(source, console=_quiet_console([]))

    result = installer.run(
        tmp_path / "default",
        category="angular",
        install_all=True,
        confirm_destination=lambda default: other,
    )

    assert result.destination == other
    assert other.is_dir()
    assert not (tmp_path / "default").exists()


def test_empty_registry_is_unavailable(tmp_path: Path) -> None:
    installer = Installer(StubSource([]), console=_quiet_console([]))

    with pytest.raises(RegistryUnavailable):
        installer.run(tmp_path)


def test_list_installed_reports_declared_names(skills_root: Path, tmp_path: Path) -> None:
    destination = tmp_path / "dest"
    source = LocalSkillSource(skills_root)
    source.materialize(SkillRecord("angular", "ng-a"), destination)
    (destination / "loose.txt").write_text("x", encoding="utf-8")
    (destination / "empty").mkdir()

    assert list_installed(destination) == [("ng-a", "ng-a")]
    assert list_installed(tmp_path / "missing") == []
