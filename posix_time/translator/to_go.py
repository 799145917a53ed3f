"""
POSIX → Go translator.

Single pass over the pattern: a `%` opens a directive, the next character
selects it and the pair is replaced by its Go layout token. Everything else
is copied as-is.

    >>> translate("%d-%b-%y")
    '02-Jan-06'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .directives import ESCAPE, Directive, lookup
from .errors import InvalidFormatError, UnsupportedDirectiveError


@dataclass(frozen=True)
class Token:
    """Piece of the pattern and what it became."""
    source: str
    output: str
    directive: Optional[Directive] = None

    @property
    def is_literal(self) -> bool:
        return self.directive is None


def iter_tokens(pattern: str, strict: bool = False) -> Iterator[Token]:
    """
    Yield tokens of `pattern` in order.

    Args:
        pattern: POSIX strftime pattern
        strict: Reject a trailing lone `%` instead of dropping it

    Raises:
        UnsupportedDirectiveError: directive has no Go equivalent
        InvalidFormatError: unknown directive (or trailing `%` when strict)
    """
    in_escape = False

    for char in pattern:
        if not in_escape:
            if char == ESCAPE:
                in_escape = True
            else:
                yield Token(char, char)
            continue

        in_escape = False
        directive = lookup(char)

        if directive is None:
            raise InvalidFormatError(pattern)
        if not directive.supported:
            raise UnsupportedDirectiveError(char, pattern)

        yield Token(directive.token, directive.replacement, directive)

    if in_escape and strict:
        raise InvalidFormatError(pattern)


def explain(pattern: str, strict: bool = False) -> List[Token]:
    """Token breakdown of a pattern. Raises like `translate`."""
    return list(iter_tokens(pattern, strict=strict))


def translate(pattern: str, strict: bool = False) -> str:
    """
    Translate a POSIX strftime pattern into a Go time layout.

    Args:
        pattern: POSIX pattern, e.g. "%Y-%m-%d %H:%M"
        strict: Treat a trailing lone `%` as invalid

    Returns:
        Go layout string

    Example:
        >>> translate("%F %T")
        '2006-01-02 15:04:05'
    """
    return "".join(token.output for token in iter_tokens(pattern, strict=strict))
