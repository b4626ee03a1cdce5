"""Installer defaults: remote location, destination layout, network limits."""

from __future__ import annotations

GITHUB_ORG: str = "DarioCabas"
GITHUB_REPO: str = "monorepo-skills"
GITHUB_BRANCH: str = "main"
DEFAULT_REMOTE_BASE_URL: str = f"https://raw.githubusercontent.com/{GITHUB_ORG}/{GITHUB_REPO}/{GITHUB_BRANCH}"

DEFAULT_SKILLS_DIRNAME: str = "skills"
DEFAULT_INSTALL_SUBDIR: str = ".opencode/skills"
DEFAULT_FETCH_TIMEOUT_SECONDS: float = 10.0
SKILL_DOWNLOAD_TEMP_PREFIX: str = ".tmp-skill-"
SKILL_DOWNLOAD_TEMP_SUFFIX: str = ".md"

MODE_LOCAL: str = "local"
MODE_REMOTE: str = "remote"

ALL_TARGET: str = "all"
QUALIFIED_NAME_SEPARATOR: str = "/"

AUTO_AGENTS: str = "auto"
AGENT_LIST_SEPARATOR: str = ","
DEFAULT_AGENT_KEYS: tuple[str, ...] = ("claude", "opencode", "cursor", "copilot")
