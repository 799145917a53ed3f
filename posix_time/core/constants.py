"""
Constants
"""

from __future__ import annotations

import os

VERSION = "1.0.0"
TOOL_NAME = "posix-time"

CONFIG_ENV_VAR = "POSIX_TIME_CONFIG"
OUTPUT_FORMATS = ("text", "json")


class Colors:
    """ANSI colors for console output"""
    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    END = "\033[0m"

    def __init__(self) -> None:
        if os.environ.get("NO_COLOR"):
            self.disable()

    def disable(self) -> None:
        """Turn colors off for this process"""
        self.GREEN = self.RED = self.YELLOW = self.CYAN = self.BOLD = self.END = ""

    def colorize(self, text: str, color: str) -> str:
        return f"{color}{text}{self.END}"

    def success(self, text: str) -> str:
        return self.colorize(f"✅ {text}", self.GREEN)

    def error(self, text: str) -> str:
        return self.colorize(f"❌ {text}", self.RED)

    def warning(self, text: str) -> str:
        return self.colorize(f"⚠️  {text}", self.YELLOW)


COLORS = Colors()
