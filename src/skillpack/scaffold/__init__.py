"""Scaffolding for new skill documents."""

from .create import check_name, create_skill, format_trigger, skill_path
from .template import SKILL_TEMPLATE, render_skill_document

__all__ = ["SKILL_TEMPLATE", "check_name", "create_skill", "format_trigger", "render_skill_document", "skill_path"]
