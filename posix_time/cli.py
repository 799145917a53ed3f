#!/usr/bin/env python3
"""
posix-time — CLI

Convert POSIX strftime patterns into Go time layouts.
"""

from __future__ import annotations

import sys
import argparse
from typing import List, Optional

from .core.constants import VERSION, COLORS, TOOL_NAME
from .core.config import get_config


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert command — translate patterns."""
    from .commands.convert import run_convert

    config = get_config()
    output_format = "json" if args.json else config.output_format

    return run_convert(
        patterns=args.patterns,
        strict=args.strict or config.strict,
        output_format=output_format,
        verbose=args.verbose,
    )


def cmd_table(args: argparse.Namespace) -> int:
    """Show directive table."""
    from .commands.table import run_table

    return run_table(unsupported_only=args.unsupported)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description=f"{TOOL_NAME} v{VERSION} — POSIX strftime to Go layout converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"{TOOL_NAME} v{VERSION}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ═══════════════════════════════════════════════════════════
    # CONVERT - Main command
    # ═══════════════════════════════════════════════════════════
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert POSIX patterns to Go layouts",
        description="🔁 Convert — Translate strftime patterns (stdin if none given)",
    )
    convert_parser.add_argument(
        "patterns",
        nargs="*",
        help="POSIX patterns, e.g. '%%Y-%%m-%%d'",
    )
    convert_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject a trailing lone '%%'",
    )
    convert_parser.add_argument(
        "--json",
        action="store_true",
        help="JSON output",
    )
    convert_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show directive breakdown",
    )
    convert_parser.set_defaults(func=cmd_convert)

    # ═══════════════════════════════════════════════════════════
    # TABLE - Directive reference
    # ═══════════════════════════════════════════════════════════
    table_parser = subparsers.add_parser(
        "table",
        help="Show directive table",
        description="📅 Table — POSIX directives and their Go layout tokens",
    )
    table_parser.add_argument(
        "--unsupported",
        action="store_true",
        help="Only directives without a Go equivalent",
    )
    table_parser.set_defaults(func=cmd_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        print(f"{TOOL_NAME} v{VERSION}")
        print(f"\nUsage: {TOOL_NAME} <command> [options]")
        print(f"\nCommands:")
        print(f"  {COLORS.CYAN}convert{COLORS.END}  🔁 Convert POSIX patterns to Go layouts")
        print(f"  {COLORS.CYAN}table{COLORS.END}    📅 Show directive table")
        print(f"\nExamples:")
        print(f"  {TOOL_NAME} convert '%d-%b-%y'")
        print(f"  {TOOL_NAME} convert --json '%F %T' '%c'")
        print(f"\nRun '{TOOL_NAME} <command> --help' for more info.")
        return 0

    try:
        if not get_config().color:
            COLORS.disable()
        return args.func(args)
    except KeyboardInterrupt:
        print(f"\n{COLORS.warning('Cancelled by user')}", file=sys.stderr)
        return 130
    except Exception as e:
        print(COLORS.error(f"Error: {e}"), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
