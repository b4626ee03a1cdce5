"""Shared type aliases for skillpack."""

from .common import DocumentStatus, Frontmatter, InstallMode, Severity

__all__ = ["DocumentStatus", "Frontmatter", "InstallMode", "Severity"]
