"""
Translation errors
"""

from __future__ import annotations


class PosixFormatError(ValueError):
    """Base error for patterns that cannot be translated."""

    def __init__(self, message: str, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


class UnsupportedDirectiveError(PosixFormatError):
    """Valid POSIX directive with no Go layout equivalent (%U, %w, %x, ...)."""

    def __init__(self, directive: str, pattern: str) -> None:
        super().__init__(f"%{directive} not supported in Go: {pattern}", pattern)
        self.directive = directive


class InvalidFormatError(PosixFormatError):
    """Character after % is not a POSIX directive at all."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"invalid format string: {pattern}", pattern)
