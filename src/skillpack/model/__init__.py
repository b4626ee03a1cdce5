"""Core data models for skillpack."""

from .entities import (
    DocumentReport,
    FailedInstall,
    Finding,
    InstallResult,
    ParsedSkillDocument,
    ScaffoldResult,
    ScanError,
    ScanResult,
    SkillRecord,
    SplitDocument,
    ValidationReport,
)
from .registry import Registry

__all__ = [
    "DocumentReport",
    "FailedInstall",
    "Finding",
    "InstallResult",
    "ParsedSkillDocument",
    "Registry",
    "ScaffoldResult",
    "ScanError",
    "ScanResult",
    "SkillRecord",
    "SplitDocument",
    "ValidationReport",
]
