"""Skill discovery package."""

from .discovery import discover_skill_files, iter_skill_records, list_categories, scan_skills

__all__ = ["discover_skill_files", "iter_skill_records", "list_categories", "scan_skills"]
