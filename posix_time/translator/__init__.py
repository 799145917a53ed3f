"""Translator module - POSIX strftime patterns to Go layouts."""

from .directives import (
    DIRECTIVES,
    ESCAPE,
    Directive,
    lookup,
    supported_directives,
    unsupported_directives,
)
from .errors import PosixFormatError, UnsupportedDirectiveError, InvalidFormatError
from .to_go import Token, iter_tokens, explain, translate
