"""
Auto-discovery CLI dispatcher for bladetags.

Scans ``cli/commands`` for command modules and registers them.
Adding a new command = adding a .py file that defines SUMMARY,
register_args() and main().
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"bladetags.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered commands."""
    parser = argparse.ArgumentParser(
        prog="bladetags",
        description="Compile custom component tags into Blade directives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from bladetags import __version__

    return __version__


_CLI_HANDLER: logging.Handler | None = None


def configure_logging(verbose: bool) -> None:
    """Send bladetags logs to stderr so stdout stays reserved for command output.

    Idempotent per-process: a handler installed by an earlier call is replaced.
    """
    global _CLI_HANDLER

    package_logger = logging.getLogger("bladetags")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if _CLI_HANDLER is not None:
        package_logger.removeHandler(_CLI_HANDLER)
        _CLI_HANDLER = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    _CLI_HANDLER = handler


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the bladetags CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(bool(getattr(args, "verbose", False)))

    func = getattr(args, "_func", None)
    if not args.command or func is None:
        parser.print_help()
        return 0

    logger.debug("Running command %s", args.command)
    return int(func(args) or 0)


__all__ = ["build_parser", "discover_commands", "configure_logging", "main"]
