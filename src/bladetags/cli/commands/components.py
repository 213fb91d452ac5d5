"""
bladetags components command.

SUMMARY: List registered components in compile order
"""

from __future__ import annotations

import argparse

from bladetags.cli import OutputFormatter, add_config_flag, add_json_flag, add_prefix_flag, get_config_manager
from bladetags.exceptions import BladeTagsError

SUMMARY = "List registered components in compile order"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_config_flag(parser)
    add_prefix_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        registry = get_config_manager(args).build_registry(prefix=args.prefix)
    except BladeTagsError as e:
        formatter.error(e, error_code="config_error")
        return 1

    components = registry.components()
    if formatter.json_mode:
        formatter.json_output({
            "prefix": registry.prefix,
            "components": [
                {**c.to_dict(), "element": c.prefixed_tag(registry.prefix)} for c in components
            ],
        })
        return 0

    if not components:
        formatter.text("No components registered.")
        return 0
    for c in components:
        line = f"<{c.prefixed_tag(registry.prefix)}> -> {c.view}"
        if c.data_model:
            line += f" [{c.data_model}]"
        formatter.text(line)
    return 0
