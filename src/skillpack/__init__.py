"""skillpack: registry, validator, scaffolder and installer for SKILL.md skills."""

from __future__ import annotations

__version__ = "0.1.0"
