#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/constants.py
"""Constants and defaults for bbview.

This module collects the fixed tables used by the parser and the renderer:
tag name aliases, the font-size ladder, marker strings and option defaults.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Parser
# =============================================================================

DEFAULT_BBCODE_STRICT_MODE = False
DEFAULT_MAX_NESTING_DEPTH = 200

# Tag bodies that are kept verbatim (tags inside are not interpreted)
RAW_CONTENT_TAGS = frozenset({"code", "pre"})

# [list=X] values that turn a list into an ordered list
ORDERED_LIST_VALUES = frozenset({"1", "a", "A", "i", "I"})

# =============================================================================
# Style
# =============================================================================

PROPORTIONAL_BODY_SIZE = 14.0
MONOSPACE_BODY_SIZE = 12.0
SCRIPT_FONT_SIZE = 7.0
STROKE_WIDTH = 1.0

# [size=N] levels mapped to point sizes, largest first
FONT_SIZE_LADDER: dict[str, float] = {
    "1": 32.0,
    "2": 24.0,
    "3": 20.8,
    "4": 16.0,
    "5": 12.8,
    "6": 11.2,
}

NAMED_COLORS: dict[str, str] = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "gray": "#808080",
    "grey": "#808080",
}

# =============================================================================
# Renderer
# =============================================================================

ORDERED_LIST_LABEL = "{index}.) "
UNORDERED_LIST_BULLET = "– "
TRUNCATION_MARKER = "[…]"

DEFAULT_MAX_RENDER_DEPTH = 256
# Upper bound for max_depth; deeper settings would run into the interpreter recursion limit
MAX_RENDER_DEPTH_LIMIT = 300
DEFAULT_DARK_MODE = True
DEFAULT_APPLY_FONT_COLOR = False

# =============================================================================
# CLI / config
# =============================================================================

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL: LogLevel = "WARNING"

CONFIG_ENV_VAR = "BBVIEW_CONFIG"
CONFIG_FILENAMES = [".bbview.toml", ".bbview.yaml", ".bbview.yml", ".bbview.json"]
