"""Installer flow: load registry, pick a category, pick skills, materialize."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from skillpack.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillpack.constants.installer import ALL_TARGET, MODE_REMOTE, QUALIFIED_NAME_SEPARATOR
from skillpack.exceptions import IOFailure, MalformedDocument, RegistryUnavailable, SkillpackError
from skillpack.installer.sources import SkillSource
from skillpack.model import FailedInstall, InstallResult, Registry, SkillRecord
from skillpack.parsers import parse_skill_markdown_file
from skillpack.reporting import Console
from skillpack.tui import SelectItem, Selector, run_selector

logger = logging.getLogger(__name__)


class Installer:
    """Drives one install session against a single skill source."""

    def __init__(
        self,
        source: SkillSource,
        *,
        select: Selector = run_selector,
        console: Console | None = None,
    ) -> None:
        self.source = source
        self._select = select
        self._console = console or Console(color=False)

    def load(self) -> Registry:
        """Load the registry once for this session."""
        registry = self.source.load_registry()
        if not len(registry):
            raise RegistryUnavailable(f"No skills found at {self.source.location}")
        return registry

    def run(
        self,
        destination_root: Path,
        *,
        category: str | None = None,
        skill_names: Sequence[str] = (),
        install_all: bool = False,
        confirm_destination: Callable[[Path], Path] | None = None,
    ) -> InstallResult:
        """Run the full flow; selection prompts are skipped for values given here.

        *category* names a technology, or else is read as a skill reference
        together with *skill_names*: a bare skill name, ``category/name`` or
        ``all`` for the whole registry. *install_all* without a category also
        takes the whole registry. An empty selection at either prompt ends the
        run cleanly with ``cancelled=True`` and no filesystem changes.
        """
        console = self._console
        console.pending("Loading skill registry...")
        registry = self.load()
        console.done(f"Found {console.highlight(str(len(registry)))} skills")
        console.info(f"Source: {self.source.location}")
        console.line()

        by_reference = (category is None and install_all) or (
            category is not None and category not in registry.categories()
        )
        if by_reference:
            records = _resolve_references(registry, category, skill_names)
            chosen_category = _shared_category(records)
        else:
            chosen_category = self._choose_category(registry, category)
            if chosen_category is None:
                console.info("Nothing selected. Exiting.")
                return InstallResult(destination=None, cancelled=True)
            console.done(f"Technology: {console.highlight(chosen_category)}")
            console.line()

            records = self._choose_skills(registry, chosen_category, skill_names, install_all)
            if not records:
                console.info("Nothing selected. Exiting.")
                return InstallResult(destination=None, category=chosen_category, cancelled=True)
        console.done(f"Skills: {console.highlight(', '.join(record.name for record in records))}")
        console.line()

        destination = confirm_destination(destination_root) if confirm_destination else destination_root
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IOFailure(f"Cannot create destination {destination}: {exc}") from exc
        console.done(f"Target: {console.highlight(str(destination))}")
        console.line()

        return self.install(records, destination, category=chosen_category)

    def install(self, records: Sequence[SkillRecord], destination: Path, *, category: str | None = None) -> InstallResult:
        """Materialize *records*; one failing skill does not stop the rest."""
        console = self._console
        installed: list[str] = []
        failed: list[FailedInstall] = []
        for record in records:
            try:
                self.source.materialize(record, destination)
            except IOFailure as exc:
                logger.warning("Install failed for %s/%s: %s", record.category, record.name, exc)
                console.warn(f"Failed: {record.name} ({exc})")
                failed.append(FailedInstall(name=record.name, reason=str(exc)))
                continue
            installed.append(record.name)
            console.done(f"Installed {console.highlight(record.name)}")

        console.line()
        console.done(f"Done! {len(installed)} skill(s) installed, {len(failed)} skipped.")
        if self.source.mode == MODE_REMOTE:
            console.info("To update: run the installer again")
        else:
            console.info("To update: git pull (symlinks sync automatically)")

        return InstallResult(
            destination=destination,
            category=category,
            installed=tuple(installed),
            failed=tuple(failed),
        )

    def _choose_category(self, registry: Registry, category: str | None) -> str | None:
        if category is not None:
            return category

        categories = registry.categories()
        self._console.ask("Which technology?")
        items = [SelectItem(name, f"{registry.count(name)} skills available") for name in categories]
        selected = self._select(items, multi=False)
        if not selected:
            return None
        return categories[selected[0]]

    def _choose_skills(
        self,
        registry: Registry,
        category: str,
        skill_names: Sequence[str],
        install_all: bool,
    ) -> list[SkillRecord]:
        records = registry.for_category(category)
        if skill_names:
            by_name = {record.name: record for record in records}
            unknown = [name for name in skill_names if name not in by_name]
            if unknown:
                raise SkillpackError(
                    f"Unknown skill(s) in '{category}': {', '.join(unknown)}. "
                    f"Available: {', '.join(by_name)}"
                )
            return [by_name[name] for name in dict.fromkeys(skill_names)]
        if install_all:
            return list(records)

        self._console.ask("Which skills? (space to select, a for all)")
        items = [SelectItem(record.name, record.description) for record in records]
        selected = self._select(items, multi=True)
        return [records[index] for index in selected]


def _resolve_references(registry: Registry, first: str | None, rest: Sequence[str]) -> list[SkillRecord]:
    if first is None or first == ALL_TARGET and not rest:
        return list(registry)
    chosen: dict[tuple[str, str], SkillRecord] = {}
    for reference in (first, *rest):
        record = _find_skill(registry, reference)
        chosen.setdefault(record.key, record)
    return list(chosen.values())


def _find_skill(registry: Registry, reference: str) -> SkillRecord:
    """Resolve ``category/name`` exactly, or a bare name across every category."""
    category, separator, name = reference.partition(QUALIFIED_NAME_SEPARATOR)
    if separator:
        record = registry.get(category, name)
        if record is None:
            raise SkillpackError(f"Unknown skill '{reference}'")
        return record

    matches = [record for record in registry if record.name == reference]
    if not matches:
        raise SkillpackError(
            f"Unknown category or skill '{reference}'. Categories: {', '.join(registry.categories())}"
        )
    if len(matches) > 1:
        choices = ", ".join(f"{record.category}/{record.name}" for record in matches)
        raise SkillpackError(f"Skill name '{reference}' is ambiguous; use one of: {choices}")
    return matches[0]


def _shared_category(records: Sequence[SkillRecord]) -> str | None:
    categories = {record.category for record in records}
    return categories.pop() if len(categories) == 1 else None


def list_installed(destination_root: Path) -> list[tuple[str, str]]:
    """Return ``(directory, declared name)`` for every installed skill."""
    if not destination_root.is_dir():
        return []
    installed: list[tuple[str, str]] = []
    for entry in sorted(destination_root.iterdir(), key=lambda path: path.name):
        document = entry / SKILL_MARKDOWN_FILENAME
        if not entry.is_dir() or not document.is_file():
            continue
        try:
            declared = parse_skill_markdown_file(document).frontmatter.get("name") or entry.name
        except (MalformedDocument, IOFailure) as exc:
            logger.warning("Cannot read installed skill %s: %s", document, exc)
            declared = entry.name
        installed.append((entry.name, declared))
    return installed
