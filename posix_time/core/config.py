"""
Configuration management
"""

from __future__ import annotations

import os
import yaml
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from .constants import CONFIG_ENV_VAR, OUTPUT_FORMATS


def default_config_path() -> Path:
    """Config path: $POSIX_TIME_CONFIG or ~/.posix_time/config.yaml"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".posix_time" / "config.yaml"


def _section(data: dict, key: str) -> dict:
    """Sub-table of the YAML document, {} when missing or not a mapping"""
    value = data.get(key)
    return value if isinstance(value, dict) else {}


@dataclass
class Config:
    """CLI defaults"""
    # Translation
    strict: bool = False

    # Output
    output_format: str = "text"
    color: bool = True

    def __post_init__(self) -> None:
        for name in ("strict", "color"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {self.output_format!r} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from file"""
        if path is None:
            path = default_config_path()

        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            return cls()

        if not isinstance(data, dict):
            return cls()

        translate = _section(data, "translate")
        output = _section(data, "output")

        return cls(
            strict=translate.get("strict", False),
            output_format=output.get("format", "text"),
            color=output.get("color", True),
        )

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file"""
        if path is None:
            path = default_config_path()

        data = {
            "translate": {
                "strict": self.strict,
            },
            "output": {
                "format": self.output_format,
                "color": self.color,
            },
        }

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


# === Global state ===

_config: Optional[Config] = None


def get_config() -> Config:
    """Get global config"""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Drop cached config (next get_config() reloads)"""
    global _config
    _config = None
