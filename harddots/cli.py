"""Command-line entry point for harddots."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from harddots.commands import add, deploy, initialize
from harddots.config import HarddotsConfig
from harddots.errors import HarddotsError

log = logging.getLogger("harddots")

CONFIG_PATH = "harddots.toml"
LOG_ENV_VAR = "HARDDOTS_LOG"


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the harddots command."""
    parser = argparse.ArgumentParser(
        prog="harddots",
        description=(
            "A personalized dotfile manager for idempotent deployment "
            "across Unix-like systems"
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser(
        "init",
        help="Initialize the dotfiles repository by cloning it to the cache directory",
    )

    deploy_parser = commands.add_parser(
        "deploy", help="Deploy one or all applications' configurations"
    )
    deploy_parser.add_argument(
        "application",
        nargs="?",
        default="all",
        help='Application name to deploy (or "all" for all applications)',
    )
    deploy_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Simulate deployment without making changes",
    )

    add_parser = commands.add_parser("add", help="Add a new application to harddots.toml")
    add_parser.add_argument("name", help="Application name")
    add_parser.add_argument(
        "target_path",
        help="Target path for the configuration file (e.g., ~/.config/starship.toml)",
    )
    add_parser.add_argument(
        "source_git_path",
        help="Source path in the Git repository (e.g., starship/starship.toml)",
    )
    add_parser.add_argument("--macos-pkg", help="Package name for macOS")
    add_parser.add_argument("--debian-pkg", help="Package name for Debian")
    add_parser.add_argument("--alpine-pkg", help="Package name for Alpine")

    return parser


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _dispatch(args: argparse.Namespace, config: HarddotsConfig) -> None:
    match args.command:
        case "init":
            initialize.run(config)
        case "deploy":
            deploy.run(config, args.application, args.dry_run)
        case "add":
            add.run(
                config,
                args.name,
                args.target_path,
                args.source_git_path,
                args.macos_pkg,
                args.debian_pkg,
                args.alpine_pkg,
                config_path=CONFIG_PATH,
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Run harddots and return its exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging()

    try:
        config = HarddotsConfig.load(CONFIG_PATH)
    except HarddotsError as exc:
        log.error("Failed to load configuration from %s: %s", CONFIG_PATH, exc)
        return 1

    try:
        _dispatch(args, config)
    except HarddotsError as exc:
        log.error("%s", exc)
        return 1
    return 0