"""CLI entrypoint for skillpack."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillpack import __version__
from skillpack.cli.handlers import (
    handle_build_registry,
    handle_create,
    handle_install,
    handle_list,
    handle_validate,
)
from skillpack.config import load_config
from skillpack.constants.branding import CLI_DESCRIPTION
from skillpack.exceptions import AlreadyExists, ConfigError, InvalidName, SkillpackError
from skillpack.reporting import Console


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillpack",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--repo-root", type=Path, default=None, help="Repository holding skills/ and registry.json")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress and skipped items")
    subparsers = parser.add_subparsers(dest="command", required=True)

    install = subparsers.add_parser("install", help="Install skills into a project")
    install.add_argument(
        "category",
        nargs="?",
        default=None,
        help="Technology, skill name, category/name or 'all' (prompted when omitted)",
    )
    install.add_argument("skills", nargs="*", default=[], help="More skill names or category/name references")
    install.add_argument("-a", "--all", action="store_true", help="Install the whole category, or the whole registry without one")
    install.add_argument("-d", "--dest", type=Path, default=None, help="Install directory (skips confirmation)")
    install.add_argument("-y", "--yes", action="store_true", help="Accept the default install directory")
    install.add_argument(
        "--agents",
        default=None,
        metavar="SPEC",
        help="Link the whole skills tree for agents: 'auto' or a comma list such as claude,cursor",
    )
    install.add_argument("-p", "--project", type=Path, default=None, help="Project root for --agents (default: cwd)")

    validate = subparsers.add_parser("validate", help="Validate SKILL.md documents")
    validate.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Skills tree, skill directory or SKILL.md (default: configured skills directory)",
    )

    create = subparsers.add_parser("create", help="Scaffold a new skill")
    create.add_argument("category", nargs="?", default=None, help="Technology (prompted when omitted)")
    create.add_argument("name", nargs="?", default=None, help="Skill name (prompted when omitted)")
    create.add_argument("--description", default=None, help="One-line description")
    create.add_argument("--trigger", default=None, help="Condition completing 'Trigger: When ...'")
    create.add_argument("--force", action="store_true", help="Overwrite an existing SKILL.md")

    subparsers.add_parser("build-registry", help="Rebuild registry.json from the skills tree")

    listing = subparsers.add_parser("list", help="List skills installed in a project")
    listing.add_argument("-d", "--dest", type=Path, default=None, help="Install directory to inspect")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    color = not args.no_color and sys.stdout.isatty()
    console = Console(color=color)

    try:
        config = load_config(repo_root=args.repo_root, config_path=args.config)
        if args.command == "install":
            return handle_install(args, config, console)
        if args.command == "validate":
            return handle_validate(args, config, color)
        if args.command == "create":
            return handle_create(args, config, console)
        if args.command == "build-registry":
            return handle_build_registry(config, console)
        if args.command == "list":
            return handle_list(args, config, console)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (InvalidName, AlreadyExists) as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2
    except SkillpackError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
