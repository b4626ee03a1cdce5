"""Where skills come from: a local checkout or the published remote tree."""

from __future__ import annotations

import logging
from contextlib import suppress
from dataclasses import replace
from pathlib import Path
from typing import Protocol

import requests

from skillpack.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillpack.constants.installer import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    MODE_LOCAL,
    MODE_REMOTE,
    SKILL_DOWNLOAD_TEMP_PREFIX,
    SKILL_DOWNLOAD_TEMP_SUFFIX,
)
from skillpack.constants.registry import REGISTRY_FILENAME
from skillpack.exceptions import IOFailure, RegistryCorrupt, RegistryUnavailable
from skillpack.io import child_path, remove_entry, replace_with_symlink, write_text_atomic
from skillpack.model import Registry, SkillRecord
from skillpack.registry import deserialize, load_registry_file
from skillpack.scanner import scan_skills
from skillpack.types import InstallMode

logger = logging.getLogger(__name__)


class SkillSource(Protocol):
    """Registry provider plus the means to place one skill into a project."""

    @property
    def mode(self) -> InstallMode: ...

    @property
    def location(self) -> str: ...

    def load_registry(self) -> Registry: ...

    def materialize(self, record: SkillRecord, destination_root: Path) -> Path: ...


def detect_mode(skills_root: Path) -> InstallMode:
    """Local when a skills directory sits next to the tool, remote otherwise."""
    return MODE_LOCAL if skills_root.is_dir() else MODE_REMOTE


class LocalSkillSource:
    """Skills read from a checkout and linked into the destination."""

    mode: InstallMode = MODE_LOCAL

    def __init__(self, skills_root: Path, registry_path: Path | None = None) -> None:
        self.skills_root = skills_root
        self.registry_path = registry_path

    @property
    def location(self) -> str:
        if self.registry_path is not None and self.registry_path.is_file():
            return str(self.registry_path)
        return str(self.skills_root)

    def load_registry(self) -> Registry:
        """Prefer the published registry file; rescan when it is absent or corrupt.

        The published file is trusted as-is; it may lag behind the tree until
        ``build-registry`` runs again.
        """
        if not self.skills_root.is_dir():
            raise RegistryUnavailable(f"Skills directory does not exist: {self.skills_root}")

        if self.registry_path is not None and self.registry_path.is_file():
            try:
                records = load_registry_file(self.registry_path)
            except (RegistryCorrupt, IOFailure) as exc:
                logger.warning("Ignoring registry %s (%s); rescanning %s", self.registry_path, exc, self.skills_root)
            else:
                return Registry(replace(record, source_path=str(self.skill_dir(record))) for record in records)

        return Registry(scan_skills(self.skills_root).records)

    def skill_dir(self, record: SkillRecord) -> Path:
        return self.skills_root / record.category / record.name

    def materialize(self, record: SkillRecord, destination_root: Path) -> Path:
        """Link ``destination_root/<name>`` to the skill directory, replacing any existing entry."""
        link = _install_target(destination_root, record)
        source = self.skill_dir(record).resolve()
        if not (source / SKILL_MARKDOWN_FILENAME).is_file():
            raise IOFailure(f"Skill source not found: {source}")
        try:
            replace_with_symlink(link, source)
        except OSError as exc:
            raise IOFailure(f"Cannot link {link} -> {source}: {exc}") from exc
        return link


class RemoteSkillSource:
    """Skills fetched over HTTP from the published repository."""

    mode: InstallMode = MODE_REMOTE

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def location(self) -> str:
        return self.registry_url

    @property
    def registry_url(self) -> str:
        return f"{self.base_url}/{REGISTRY_FILENAME}"

    def skill_url(self, record: SkillRecord) -> str:
        return f"{self.base_url}/skills/{record.category}/{record.name}/{SKILL_MARKDOWN_FILENAME}"

    def load_registry(self) -> Registry:
        try:
            payload = self._fetch(self.registry_url)
        except requests.RequestException as exc:
            raise RegistryUnavailable(f"Could not load registry from {self.registry_url}: {exc}") from exc
        try:
            records = deserialize(payload)
        except RegistryCorrupt as exc:
            raise RegistryUnavailable(f"Registry at {self.registry_url} is corrupt: {exc}") from exc
        return Registry(replace(record, source_path=self.skill_url(record)) for record in records)

    def materialize(self, record: SkillRecord, destination_root: Path) -> Path:
        """Download ``SKILL.md`` into ``destination_root/<name>/``."""
        target = _install_target(destination_root, record)
        url = self.skill_url(record)
        try:
            content = self._fetch(url).decode("utf-8")
        except requests.RequestException as exc:
            raise IOFailure(f"Download failed for {url}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise IOFailure(f"Downloaded {url} is not UTF-8: {exc}") from exc

        if target.is_symlink():
            # A previous local install links into a checkout; never write through it.
            target.unlink()
        created = not target.exists()
        try:
            target.mkdir(parents=True, exist_ok=True)
            write_text_atomic(
                path=target / SKILL_MARKDOWN_FILENAME,
                content=content,
                temp_prefix=SKILL_DOWNLOAD_TEMP_PREFIX,
                temp_suffix=SKILL_DOWNLOAD_TEMP_SUFFIX,
            )
        except OSError as exc:
            if created:
                with suppress(OSError):
                    remove_entry(target)
            raise IOFailure(f"Cannot write {target}: {exc}") from exc
        return target

    def _fetch(self, url: str) -> bytes:
        logger.info("GET %s", url)
        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content


def _install_target(destination_root: Path, record: SkillRecord) -> Path:
    try:
        return child_path(destination_root, record.name)
    except ValueError as exc:
        raise IOFailure(f"Refusing to install '{record.category}/{record.name}' outside {destination_root}") from exc
