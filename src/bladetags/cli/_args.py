"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag pointing at a project config file."""
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a bladetags YAML config (default: ./bladetags.yaml if present)",
    )


def add_prefix_flag(parser: argparse.ArgumentParser) -> None:
    """Add --prefix flag overriding the configured tag prefix."""
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Tag prefix, e.g. 'x-' to match <x-card> (overrides config)",
    )


__all__ = ["add_json_flag", "add_config_flag", "add_prefix_flag"]
