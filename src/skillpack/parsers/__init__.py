"""SKILL.md parsing."""

from .frontmatter import (
    extract_fields,
    extract_frontmatter,
    parse_skill_document,
    parse_skill_markdown_file,
    read_document,
    split_document,
)
from .naming import is_valid_name

__all__ = [
    "extract_fields",
    "extract_frontmatter",
    "is_valid_name",
    "parse_skill_document",
    "parse_skill_markdown_file",
    "read_document",
    "split_document",
]
