"""Config data model for skillpack."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillpack.constants.installer import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_INSTALL_SUBDIR,
    DEFAULT_REMOTE_BASE_URL,
    DEFAULT_SKILLS_DIRNAME,
)
from skillpack.constants.registry import REGISTRY_FILENAME
from skillpack.constants.validation import (
    DEFAULT_DESCRIPTION_MIN_LENGTH,
    DEFAULT_PLACEHOLDER_WARNINGS,
    DEFAULT_STRICT_SCOPE,
)


@dataclass(frozen=True)
class ValidationPolicy:
    """Tunable thresholds for the validator."""

    description_min_length: int = DEFAULT_DESCRIPTION_MIN_LENGTH
    strict_scope: bool = DEFAULT_STRICT_SCOPE
    placeholder_warnings: bool = DEFAULT_PLACEHOLDER_WARNINGS


@dataclass(frozen=True)
class SkillpackConfig:
    """Resolved skillpack config."""

    repo_root: Path
    skills_dir: str = DEFAULT_SKILLS_DIRNAME
    registry_file: str = REGISTRY_FILENAME
    remote_base_url: str = DEFAULT_REMOTE_BASE_URL
    install_subdir: str = DEFAULT_INSTALL_SUBDIR
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    validation: ValidationPolicy = ValidationPolicy()

    @property
    def skills_root(self) -> Path:
        return self.repo_root / self.skills_dir

    @property
    def registry_path(self) -> Path:
        return self.repo_root / self.registry_file

    def default_destination(self, project_root: Path) -> Path:
        """Install location inside *project_root*."""
        return project_root / self.install_subdir
