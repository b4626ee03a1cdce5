"""Skill installation into a target project."""

from .agents import AGENT_TARGETS, AgentTarget, detect_agents, link_agents, parse_agent_spec, resolve_agents
from .orchestrator import Installer, list_installed
from .sources import LocalSkillSource, RemoteSkillSource, SkillSource, detect_mode

__all__ = [
    "AGENT_TARGETS",
    "AgentTarget",
    "Installer",
    "LocalSkillSource",
    "RemoteSkillSource",
    "SkillSource",
    "detect_agents",
    "detect_mode",
    "link_agents",
    "list_installed",
    "parse_agent_spec",
    "resolve_agents",
]
