"""
posix-time — Table Command

Print the directive reference.
"""

from __future__ import annotations

from typing import List

from ..core.constants import COLORS
from ..translator import Directive, supported_directives, unsupported_directives


def format_table(unsupported_only: bool = False) -> str:
    """
    Format directive table as text.

    Example output:
      %Y    2006                        year with century
      %d    02                          day of the month (01-31)
      ...
      %U    (unsupported)               week of the year, Sunday first (00-53)
    """
    lines: List[str] = []
    rows: List[Directive] = [] if unsupported_only else supported_directives()
    rows += unsupported_directives()

    for directive in rows:
        if directive.supported:
            replacement = directive.replacement.replace("\t", "\\t").replace("\n", "\\n")
            replacement = f"{replacement:<28}"
        else:
            replacement = COLORS.colorize(f"{'(unsupported)':<28}", COLORS.YELLOW)
        lines.append(
            f"  {COLORS.CYAN}{directive.token:<5}{COLORS.END} {replacement}{directive.description}"
        )

    return "\n".join(lines)


def run_table(unsupported_only: bool = False) -> int:
    """Show directive table."""
    title = "Unsupported directives" if unsupported_only else "POSIX → Go directives"
    print(f"\n📅 {COLORS.BOLD}{title}{COLORS.END}\n")
    print(format_table(unsupported_only=unsupported_only))
    return 0
