"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from skillpack.cli.prompts import collect_scaffold_answers, make_destination_prompt
from skillpack.config import SkillpackConfig
from skillpack.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillpack.constants.installer import MODE_LOCAL
from skillpack.exceptions import SkillpackError
from skillpack.installer import (
    Installer,
    LocalSkillSource,
    RemoteSkillSource,
    SkillSource,
    detect_mode,
    link_agents,
    list_installed,
    parse_agent_spec,
    resolve_agents,
)
from skillpack.model import ValidationReport
from skillpack.registry import build_registry
from skillpack.reporting import Console, ValidationReporter
from skillpack.scaffold import create_skill
from skillpack.scanner import list_categories
from skillpack.validator import validate_file, validate_tree


def build_source(config: SkillpackConfig) -> SkillSource:
    """Pick the local checkout when present, the remote tree otherwise."""
    if detect_mode(config.skills_root) == MODE_LOCAL:
        return LocalSkillSource(config.skills_root, config.registry_path)
    return RemoteSkillSource(config.remote_base_url, timeout=config.fetch_timeout)


def handle_install(args: argparse.Namespace, config: SkillpackConfig, console: Console) -> int:
    """Run ``skillpack install``."""
    if args.agents is not None:
        return handle_agent_setup(args, config, console)

    installer = Installer(build_source(config), console=console)
    if args.dest is not None:
        destination_root = args.dest.expanduser().resolve()
        confirm = None
    else:
        destination_root = config.default_destination(Path.cwd())
        confirm = None if args.yes else make_destination_prompt(config.install_subdir, console=console)

    try:
        installer.run(
            destination_root,
            category=args.category,
            skill_names=tuple(args.skills),
            install_all=args.all,
            confirm_destination=confirm,
        )
    except (EOFError, KeyboardInterrupt):
        print("Install cancelled.", file=sys.stderr)
        return 130
    return 0


def handle_agent_setup(args: argparse.Namespace, config: SkillpackConfig, console: Console) -> int:
    """Run ``skillpack install --agents``: link the checkout for each agent in a project."""
    if args.category is not None or args.skills or args.all or args.dest is not None:
        print("Input error: --agents links the whole skills tree; drop the skill selection and --dest", file=sys.stderr)
        return 2
    keys = parse_agent_spec(args.agents)
    if detect_mode(config.skills_root) != MODE_LOCAL:
        raise SkillpackError(f"Agent setup needs a local checkout; no skills directory at {config.skills_root}")

    project_root = (args.project or Path.cwd()).expanduser().resolve()
    agents = resolve_agents(keys, project_root)
    if not keys:
        console.info(f"Agents: {', '.join(agent.label for agent in agents)}")
    link_agents(config.skills_root, project_root, agents, console=console)
    return 0


def handle_validate(args: argparse.Namespace, config: SkillpackConfig, color: bool) -> int:
    """Run ``skillpack validate``; exit 1 when any document has errors."""
    target = (args.path or config.skills_root).expanduser().resolve()
    if not target.exists():
        print(f"Configuration error: path does not exist: {target}", file=sys.stderr)
        return 2

    if target.is_file():
        report = ValidationReport(documents=(validate_file(target, config.validation),))
    elif (target / SKILL_MARKDOWN_FILENAME).is_file():
        report = ValidationReport(documents=(validate_file(target / SKILL_MARKDOWN_FILENAME, config.validation),))
    else:
        report = validate_tree(target, config.validation)

    print(ValidationReporter(report, color=color).render())
    return 0 if report.passed else 1


def handle_create(args: argparse.Namespace, config: SkillpackConfig, console: Console) -> int:
    """Run ``skillpack create``, prompting for anything not given as an argument."""
    skills_root = config.skills_root
    categories = list_categories(skills_root) if skills_root.is_dir() else []

    try:
        answers = collect_scaffold_answers(
            skills_root=skills_root,
            categories=categories,
            category=args.category,
            name=args.name,
            description=args.description,
            trigger=args.trigger,
            console=console,
        )
    except (EOFError, KeyboardInterrupt):
        print("Create cancelled.", file=sys.stderr)
        return 130

    result = create_skill(
        skills_root,
        answers.category,
        answers.name,
        description=answers.description,
        trigger=answers.trigger,
        overwrite=args.force,
        policy=config.validation,
        registry_path=config.registry_path,
    )

    console.done(f"Created {console.highlight(str(result.path))}")
    if result.registry_refreshed:
        console.done(f"Registry updated: {config.registry_path}")
    for finding in result.findings:
        if finding.is_error:
            console.error(f"[{finding.rule_id}] {finding.message}")
        else:
            console.warn(f"[{finding.rule_id}] {finding.message}")
    console.line()
    console.info(f"Next: edit {result.path}")
    return 0


def handle_build_registry(config: SkillpackConfig, console: Console) -> int:
    """Run ``skillpack build-registry``."""
    result = build_registry(config.skills_root, config.registry_path)
    for error in result.errors:
        console.warn(f"{error.category}/{error.name}: {error.message}")
    console.done(f"Wrote {console.highlight(str(len(result.records)))} skills to {config.registry_path}")
    return 0


def handle_list(args: argparse.Namespace, config: SkillpackConfig, console: Console) -> int:
    """Run ``skillpack list``."""
    destination_root = (
        args.dest.expanduser().resolve() if args.dest is not None else config.default_destination(Path.cwd())
    )
    installed = list_installed(destination_root)
    if not installed:
        console.info(f"No skills installed at {destination_root}")
        return 0

    console.done(f"{len(installed)} skill(s) at {destination_root}")
    for directory, declared in installed:
        suffix = "" if declared == directory else f"  ({declared})"
        console.line(f"  {console.highlight(directory)}{suffix}")
    return 0
