"""
posix-time

Convert POSIX strftime patterns (%Y-%m-%d) into Go time layouts (2006-01-02).
"""

from .core.constants import VERSION as __version__
from .translator import (
    DIRECTIVES,
    Directive,
    Token,
    PosixFormatError,
    UnsupportedDirectiveError,
    InvalidFormatError,
    translate,
    explain,
    iter_tokens,
)
