"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def skills_root(fixtures_root: Path) -> Path:
    """Return the well-formed fixture skills tree."""
    return fixtures_root / "skills"


@pytest.fixture(scope="session")
def broken_root(fixtures_root: Path) -> Path:
    """Return the fixture tree of documents with known problems."""
    return fixtures_root / "broken"


@pytest.fixture
def repo_copy(tmp_path: Path, skills_root: Path) -> Path:
    """Return a writable repository root holding a copy of the fixture skills."""
    repo = tmp_path / "repo"
    shutil.copytree(skills_root, repo / "skills")
    return repo


@pytest.fixture
def write_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes ``<root>/<category>/<name>/SKILL.md``."""

    def _write(category: str, name: str, content: str, root: Path | None = None) -> Path:
        path = (root or tmp_path / "skills") / category / name / "SKILL.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
