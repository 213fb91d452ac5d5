"""
bladetags compile command.

SUMMARY: Compile a template's component tags into Blade directives
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bladetags.cli import OutputFormatter, add_config_flag, add_json_flag, add_prefix_flag, get_config_manager
from bladetags.exceptions import BladeTagsError

SUMMARY = "Compile a template's component tags into Blade directives"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Template file to compile ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write compiled template to this file instead of stdout",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a rewrite report to stderr",
    )
    add_config_flag(parser)
    add_prefix_flag(parser)
    add_json_flag(parser)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        compiler = get_config_manager(args).build_compiler(prefix=args.prefix)
        source = _read_source(args.path)
        compiled, report = compiler.compile_with_report(source)
        if args.output:
            Path(args.output).write_text(compiled, encoding="utf-8")
    except (BladeTagsError, OSError, UnicodeDecodeError) as e:
        formatter.error(e, error_code="compile_error")
        return 1

    if formatter.json_mode:
        payload = {"source": args.path, "report": report.to_dict()}
        if args.output:
            payload["output"] = args.output
        else:
            payload["compiled"] = compiled
        formatter.json_output(payload)
        return 0

    if not args.output:
        sys.stdout.write(compiled)

    if args.report:
        for entry in report.passes:
            rewrites = ", ".join(f"{kind}={count}" for kind, count in entry.rewrites.items())
            print(f"{report.prefix}{entry.tag} ({entry.view}): {rewrites}", file=sys.stderr)
        print(f"total rewrites: {report.total_rewrites}", file=sys.stderr)

    return 0
