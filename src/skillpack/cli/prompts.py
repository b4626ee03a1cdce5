"""Line-oriented prompts for the ``create`` and ``install`` commands."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from skillpack.constants.naming import NAME_HINT
from skillpack.constants.scaffold import NEW_CATEGORY_CHOICES, TRIGGER_PREFIX
from skillpack.parsers import is_valid_name
from skillpack.reporting import Console
from skillpack.scaffold.create import skill_path
from skillpack.tui import read_line

Reader: TypeAlias = Callable[[str], str]


@dataclass(frozen=True)
class ScaffoldAnswers:
    """Values collected for a new skill."""

    category: str
    name: str
    description: str
    trigger: str


def prompt_yes_no(question: str, *, default: bool, read: Reader) -> bool:
    """Ask a yes/no question; empty input takes *default*."""
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        answer = read(f"  {question} {suffix} ").strip().lower()
        if not answer:
            return default
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def prompt_required(label: str, *, read: Reader, console: Console) -> str:
    """Ask until a non-empty answer is given."""
    while True:
        answer = read(f"  {label}").strip()
        if answer:
            return answer
        console.warn("A value is required")


def prompt_category(categories: list[tuple[str, int]], *, read: Reader, console: Console) -> str:
    """Choose an existing category by number or enter a new one."""
    if categories:
        console.line("  Existing technologies:")
        for position, (category, count) in enumerate(categories, start=1):
            console.line(f"  {position})  {category}  ({count} skills)")
        console.line("  n)  New technology")
        console.line()

    while True:
        if categories:
            choice = read(f"  Choose [1-{len(categories)} or n]: ").strip()
            if choice in NEW_CATEGORY_CHOICES:
                category = read("  Technology name: ").strip()
            elif choice.isdigit() and 1 <= int(choice) <= len(categories):
                category = categories[int(choice) - 1][0]
            else:
                console.warn("Invalid option")
                continue
        else:
            category = read("  Technology name: ").strip()

        if is_valid_name(category):
            return category
        console.warn(f"Use {NAME_HINT}")


def prompt_skill_name(skills_root: Path, category: str, *, read: Reader, console: Console) -> str:
    """Ask for a skill name that is well-formed and not taken."""
    while True:
        name = read("  Name: ").strip()
        if not is_valid_name(name):
            console.warn(f"Use {NAME_HINT}")
            continue
        if skill_path(skills_root, category, name).exists():
            console.warn(f"'{category}/{name}' already exists. Choose a different name.")
            continue
        return name


def collect_scaffold_answers(
    *,
    skills_root: Path,
    categories: list[tuple[str, int]],
    category: str | None = None,
    name: str | None = None,
    description: str | None = None,
    trigger: str | None = None,
    read: Reader = read_line,
    console: Console,
) -> ScaffoldAnswers:
    """Fill in whatever the command line did not provide."""
    console.ask("Technology")
    if category is None:
        category = prompt_category(categories, read=read, console=console)
    console.done(f"Technology: {console.highlight(category)}")
    console.line()

    console.ask("Skill name")
    console.info(f"Use {NAME_HINT}")
    if name is None:
        name = prompt_skill_name(skills_root, category, read=read, console=console)
    console.done(f"Name: {console.highlight(name)}")
    console.line()

    console.ask("Description")
    console.info("One line, shown in the installer. What does this skill detect or enforce?")
    if not (description or "").strip():
        description = prompt_required("Description: ", read=read, console=console)
    console.done(f"Description: {description}")
    console.line()

    console.ask("Trigger clause")
    console.info(f"When should the AI agent use this skill? Complete: '{TRIGGER_PREFIX}...'")
    if not (trigger or "").strip():
        trigger = prompt_required(f"{TRIGGER_PREFIX} ", read=read, console=console)
    console.done(f"{TRIGGER_PREFIX} {trigger}")
    console.line()

    return ScaffoldAnswers(category=category, name=name, description=description, trigger=trigger)


def make_destination_prompt(
    install_subdir: str,
    *,
    read: Reader = read_line,
    console: Console,
) -> Callable[[Path], Path]:
    """Return a callback that confirms or overrides the install destination."""

    def _confirm(default: Path) -> Path:
        console.ask(f"Install to: {console.highlight(str(default))}")
        if prompt_yes_no("Use this path?", default=True, read=read):
            return default
        while True:
            project = Path(read("  Project path: ").strip()).expanduser()
            if project.is_dir():
                return project / install_subdir
            console.warn("Not found. Try again.")

    return _confirm
