"""Project-wide links that expose the whole skills tree to AI coding agents."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from skillpack.constants.installer import AGENT_LIST_SEPARATOR, AUTO_AGENTS, DEFAULT_AGENT_KEYS
from skillpack.exceptions import InvalidName
from skillpack.io import replace_with_symlink
from skillpack.model import FailedInstall, InstallResult
from skillpack.reporting import Console
from skillpack.scanner import discover_skill_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentTarget:
    """Where one agent looks for skills inside a project."""

    key: str
    label: str
    config_dir: str
    link_name: str

    @property
    def relative_link(self) -> str:
        return f"{self.config_dir}/{self.link_name}"

    def link_path(self, project_root: Path) -> Path:
        return project_root / self.config_dir / self.link_name


AGENT_TARGETS: dict[str, AgentTarget] = {
    target.key: target
    for target in (
        AgentTarget("claude", "Claude Code", ".claude", "skills"),
        AgentTarget("opencode", "OpenCode", ".opencode", "skill"),
        AgentTarget("cursor", "Cursor", ".cursor", "rules"),
        AgentTarget("copilot", "GitHub Copilot", ".github", "skills"),
        AgentTarget("gemini", "Gemini CLI", ".gemini", "skills"),
        AgentTarget("codex", "Codex", ".codex", "skills"),
    )
}


def parse_agent_spec(value: str) -> tuple[str, ...]:
    """Split ``claude,cursor`` into known agent keys; ``auto`` yields ``()``.

    Raises:
        InvalidName: an entry names no known agent.
    """
    if value.strip().lower() == AUTO_AGENTS:
        return ()
    keys = [key.strip().lower() for key in value.split(AGENT_LIST_SEPARATOR) if key.strip()]
    unknown = [key for key in keys if key not in AGENT_TARGETS]
    if unknown or not keys:
        raise InvalidName(
            f"Unknown agent(s): {', '.join(unknown) or value!r}. "
            f"Choose '{AUTO_AGENTS}' or from: {', '.join(AGENT_TARGETS)}"
        )
    return tuple(dict.fromkeys(keys))


def detect_agents(project_root: Path) -> tuple[AgentTarget, ...]:
    """Agents whose configuration directory already exists in *project_root*."""
    return tuple(target for target in AGENT_TARGETS.values() if (project_root / target.config_dir).is_dir())


def resolve_agents(keys: Sequence[str], project_root: Path) -> tuple[AgentTarget, ...]:
    """Explicit *keys* win; otherwise detected agents, falling back to the common set."""
    if keys:
        return tuple(AGENT_TARGETS[key] for key in keys)
    return detect_agents(project_root) or tuple(AGENT_TARGETS[key] for key in DEFAULT_AGENT_KEYS)


def link_agents(
    skills_root: Path,
    project_root: Path,
    agents: Sequence[AgentTarget],
    *,
    console: Console,
) -> InstallResult:
    """Point each agent's skills location at *skills_root*.

    An existing symlink is replaced. A real file or directory in the way is
    left untouched and reported as failed.
    """
    source = skills_root.resolve()
    console.info(f"Skills directory: {source}")
    console.info(f"Project: {project_root}")
    console.line()

    linked: list[str] = []
    failed: list[FailedInstall] = []
    for agent in agents:
        link = agent.link_path(project_root)
        if link.exists() and not link.is_symlink():
            reason = f"{agent.relative_link} exists and is not a symlink"
            logger.warning("Skipping %s: %s", agent.label, reason)
            console.warn(f"{agent.label}: {reason}")
            failed.append(FailedInstall(name=agent.key, reason=reason))
            continue
        try:
            replace_with_symlink(link, source)
        except OSError as exc:
            logger.warning("Cannot link %s -> %s: %s", link, source, exc)
            console.error(f"{agent.label}: cannot link {agent.relative_link} ({exc})")
            failed.append(FailedInstall(name=agent.key, reason=str(exc)))
            continue
        linked.append(agent.key)
        console.done(f"{agent.label}: skills linked to {console.highlight(agent.relative_link + '/')}")

    console.line()
    console.done(f"Done! {len(linked)} agent(s) linked, {len(failed)} skipped.")
    console.info(f"Total skills available: {len(discover_skill_files(source))}")
    console.warn("Restart your AI coding assistant to load the skills")
    return InstallResult(destination=project_root, installed=tuple(linked), failed=tuple(failed))
