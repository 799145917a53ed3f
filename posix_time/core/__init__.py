"""Core module - constants, config."""

from .constants import VERSION, COLORS, TOOL_NAME
from .config import Config, get_config, reset_config, default_config_path
