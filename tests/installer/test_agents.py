"""Tests for per-agent links to the skills tree."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillpack.exceptions import InvalidName
from skillpack.installer import AGENT_TARGETS, detect_agents, link_agents, parse_agent_spec, resolve_agents
from skillpack.reporting import Console


def _quiet_console(lines: list[str]) -> Console:
    return Console(color=False, write=lines.append)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("auto", ()), ("AUTO", ()), ("claude", ("claude",)), ("cursor, claude,cursor", ("cursor", "claude"))],
    ids=["auto", "auto-upper", "single", "list-deduplicated"],
)
def test_parse_agent_spec(value: str, expected: tuple[str, ...]) -> None:
    assert parse_agent_spec(value) == expected


@pytest.mark.parametrize("value", ["vim", "claude,vim", ",", ""], ids=["unknown", "mixed", "separator-only", "empty"])
def test_parse_agent_spec_rejects_unknown(value: str) -> None:
    with pytest.raises(InvalidName, match="Unknown agent"):
        parse_agent_spec(value)


def test_detect_agents_uses_existing_config_dirs(tmp_path: Path) -> None:
    (tmp_path / ".cursor").mkdir()
    (tmp_path / ".codex").mkdir()
    (tmp_path / ".claude").write_text("not a directory", encoding="utf-8")

    assert [agent.key for agent in detect_agents(tmp_path)] == ["cursor", "codex"]


def test_resolve_agents_falls_back_to_common_set(tmp_path: Path) -> None:
    assert [agent.key for agent in resolve_agents((), tmp_path)] == ["claude", "opencode", "cursor", "copilot"]
    assert [agent.key for agent in resolve_agents(("gemini",), tmp_path)] == ["gemini"]


def test_link_agents_points_each_agent_at_skills_tree(skills_root: Path, tmp_path: Path) -> None:
    project = tmp_path / "project"
    agents = resolve_agents((), project)
    lines: list[str] = []

    result = link_agents(skills_root, project, agents, console=_quiet_console(lines))

    assert result.installed == ("claude", "opencode", "cursor", "copilot")
    for link in (".claude/skills", ".opencode/skill", ".cursor/rules", ".github/skills"):
        assert (project / link).is_symlink()
        assert (project / link).resolve() == skills_root.resolve()
    assert (project / ".claude" / "skills" / "angular" / "ng-a" / "SKILL.md").is_file()
    assert any("Total skills available: 3" in line for line in lines)


def test_link_agents_replaces_symlink_but_keeps_real_directory(skills_root: Path, tmp_path: Path) -> None:
    project = tmp_path / "project"
    stale = tmp_path / "stale"
    stale.mkdir()
    (project / ".claude").mkdir(parents=True)
    (project / ".claude" / "skills").symlink_to(stale, target_is_directory=True)
    kept = project / ".cursor" / "rules"
    kept.mkdir(parents=True)
    (kept / "house.mdc").write_text("keep", encoding="utf-8")
    agents = [AGENT_TARGETS["claude"], AGENT_TARGETS["cursor"]]

    result = link_agents(skills_root, project, agents, console=_quiet_console([]))

    assert result.installed == ("claude",)
    assert [failure.name for failure in result.failed] == ["cursor"]
    assert (project / ".claude" / "skills").resolve() == skills_root.resolve()
    assert stale.is_dir()
    assert not kept.is_symlink()
    assert (kept / "house.mdc").read_text(encoding="utf-8") == "keep"
