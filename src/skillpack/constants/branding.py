"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLPACK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLPACK",
    "     // agent skills for your project",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill registry and installer"))
