"""
posix-time — Convert Command

Translate POSIX patterns into Go layouts.
"""

from __future__ import annotations

import json
import sys
from typing import Iterable, List, Optional, TextIO

from ..core.constants import COLORS
from ..translator import PosixFormatError, Token, explain
from ..types import ConversionResult, OutputFormat


def read_patterns(stream: TextIO) -> List[str]:
    """One pattern per line, trailing newline stripped, empty lines skipped."""
    lines = (line.rstrip("\r\n") for line in stream)
    return [line for line in lines if line]


def convert_pattern(pattern: str, strict: bool = False) -> tuple[ConversionResult, List[Token]]:
    """Convert one pattern, capturing the error instead of raising."""
    try:
        tokens = explain(pattern, strict=strict)
    except PosixFormatError as e:
        return {"pattern": pattern, "layout": None, "error": str(e)}, []

    layout = "".join(t.output for t in tokens)
    return {"pattern": pattern, "layout": layout, "error": None}, tokens


def _show(text: str) -> str:
    """Make tabs/newlines visible."""
    return text.replace("\t", "\\t").replace("\n", "\\n")


def _print_breakdown(tokens: List[Token]) -> None:
    directives = [t for t in tokens if not t.is_literal]
    for i, token in enumerate(directives):
        prefix = "└─" if i == len(directives) - 1 else "├─"
        print(
            f"   {prefix} {COLORS.CYAN}{token.source:<4}{COLORS.END}"
            f" → {_show(token.output):<26} {token.directive.description}"
        )


def run_convert(
    patterns: Optional[Iterable[str]] = None,
    strict: bool = False,
    output_format: OutputFormat = "text",
    verbose: bool = False,
) -> int:
    """Convert patterns. Reads stdin when no patterns are given."""
    if not patterns:
        patterns = read_patterns(sys.stdin)

    results: List[ConversionResult] = []
    failed = 0

    for pattern in patterns:
        result, tokens = convert_pattern(pattern, strict=strict)
        results.append(result)

        if result["error"] is not None:
            failed += 1
            if output_format == "text":
                print(COLORS.error(result["error"]), file=sys.stderr)
            continue

        if output_format == "text":
            if verbose:
                print(f"{COLORS.BOLD}{_show(pattern)}{COLORS.END} → {_show(result['layout'])}")
                _print_breakdown(tokens)
            else:
                print(result["layout"])

    if output_format == "json":
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return 1 if failed else 0
