"""Publish-time registry build: scan the skills tree and write ``registry.json``."""

from __future__ import annotations

import logging
from pathlib import Path

from skillpack.model import ScanResult
from skillpack.registry.codec import write_registry_file
from skillpack.scanner import scan_skills

logger = logging.getLogger(__name__)


def build_registry(skills_root: Path, output_path: Path) -> ScanResult:
    """Rescan *skills_root* and rewrite the registry at *output_path*."""
    result = scan_skills(skills_root)
    write_registry_file(result.records, output_path)
    logger.info("Wrote %s with %d skills", output_path, len(result.records))
    return result
