"""SKILL.md validation."""

from .engine import validate_file, validate_skill, validate_tree
from .rules import RULES, RuleContext

__all__ = ["RULES", "RuleContext", "validate_file", "validate_skill", "validate_tree"]
