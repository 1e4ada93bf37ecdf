#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbview/options/viewer.py
"""Configuration options for the style-cascade renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbview.constants import DEFAULT_APPLY_FONT_COLOR, DEFAULT_MAX_RENDER_DEPTH, MAX_RENDER_DEPTH_LIMIT
from bbview.options.base import BaseRendererOptions


@dataclass(frozen=True)
class ViewerOptions(BaseRendererOptions):
    """Configuration options for rendering BBCode trees onto a sink.

    Parameters
    ----------
    max_depth : int, default 256
        Deepest tree level that is rendered. Nodes below it are replaced by a
        single truncation marker and a warning is logged.
    apply_font_color : bool, default False
        Whether ``[color=...]`` changes the text colour. Off by default, in
        which case the tag is accepted but leaves the colour untouched.

    """

    max_depth: int = field(
        default=DEFAULT_MAX_RENDER_DEPTH,
        metadata={"help": "Maximum tree depth rendered before truncating"},
    )
    apply_font_color: bool = field(
        default=DEFAULT_APPLY_FONT_COLOR,
        metadata={"help": "Apply [color=...] values to the text colour"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_depth is outside 1..MAX_RENDER_DEPTH_LIMIT.

        """
        if not 0 < self.max_depth <= MAX_RENDER_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_RENDER_DEPTH_LIMIT}, got {self.max_depth}")
