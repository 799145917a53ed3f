"""
Directive catalogue — POSIX strftime directives and their Go layout tokens.

Go layouts are written as the reference time would render:

    Mon Jan 2 15:04:05 MST 2006

so every directive maps to the piece of that timestamp with the same meaning.
`_2` is a space-padded day, `002` a zero-padded day of year.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

ESCAPE = "%"


@dataclass(frozen=True)
class Directive:
    """One POSIX directive character."""
    char: str
    replacement: Optional[str]  # None: no Go equivalent
    description: str

    @property
    def supported(self) -> bool:
        return self.replacement is not None

    @property
    def token(self) -> str:
        """Directive as written in a pattern, e.g. `%Y`."""
        return ESCAPE + self.char


_TABLE: List[Directive] = [
    Directive("A", "Monday", "full weekday name"),
    Directive("a", "Mon", "abbreviated weekday name"),
    Directive("B", "January", "full month name"),
    Directive("b", "Jan", "abbreviated month name"),
    Directive("C", "06", "century (year / 100), zero-padded"),
    Directive("c", "Mon Jan _2 15:04:05 2006", "time and date"),
    Directive("D", "1/2/06", "equivalent to %m/%d/%y"),
    Directive("d", "02", "day of the month (01-31)"),
    Directive("e", "_2", "day of the month (1-31), blank-padded"),
    Directive("F", "2006-01-02", "equivalent to %Y-%m-%d"),
    Directive("H", "15", "hour, 24-hour clock (00-23)"),
    Directive("h", "Jan", "same as %b"),
    Directive("I", "3", "hour, 12-hour clock (01-12)"),
    Directive("j", "002", "day of the year (001-366)"),
    Directive("k", "_15", "hour, 24-hour clock (0-23), blank-padded"),
    Directive("l", "_3", "hour, 12-hour clock (1-12), blank-padded"),
    Directive("M", "04", "minute (00-59)"),
    Directive("m", "1", "month (01-12)"),
    Directive("n", "\n", "a newline"),
    Directive("p", "PM", "a.m. or p.m."),
    Directive("R", "15:04", "equivalent to %H:%M"),
    Directive("r", "3:04:05 PM", "equivalent to %I:%M:%S %p"),
    Directive("S", "05", "second (00-60)"),
    Directive("T", "15:04:05", "equivalent to %H:%M:%S"),
    Directive("t", "\t", "a tab"),
    Directive("v", "_2-Jan-2006", "equivalent to %e-%b-%Y"),
    Directive("Y", "2006", "year with century"),
    Directive("y", "06", "year without century (00-99)"),
    Directive("Z", "MST", "time zone name"),
    Directive("z", "-0700", "time zone offset from UTC"),
    Directive(ESCAPE, ESCAPE, "a literal '%'"),
    # No Go equivalent
    Directive("U", None, "week of the year, Sunday first (00-53)"),
    Directive("u", None, "weekday, Monday first (1-7)"),
    Directive("V", None, "ISO week of the year, Monday first (01-53)"),
    Directive("W", None, "week of the year, Monday first (00-53)"),
    Directive("w", None, "weekday, Sunday first (0-6)"),
    Directive("X", None, "national representation of the time"),
    Directive("x", None, "national representation of the date"),
]

DIRECTIVES: Mapping[str, Directive] = MappingProxyType({d.char: d for d in _TABLE})


def lookup(char: str) -> Optional[Directive]:
    """Get directive by selector character, None if unknown."""
    return DIRECTIVES.get(char)


def supported_directives() -> List[Directive]:
    """Directives with a Go replacement, in table order."""
    return [d for d in _TABLE if d.supported]


def unsupported_directives() -> List[Directive]:
    """Directives that fail translation, in table order."""
    return [d for d in _TABLE if not d.supported]
