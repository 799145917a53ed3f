"""
Types for posix-time
"""

from __future__ import annotations

from typing import TypedDict, Literal, TypeAlias


# ======================================
# Type Aliases
# ======================================

OutputFormat: TypeAlias = Literal["text", "json"]


# ======================================
# TypedDicts
# ======================================

class ConversionResult(TypedDict):
    """One converted pattern (JSON output of `convert`)"""
    pattern: str
    layout: str | None
    error: str | None
