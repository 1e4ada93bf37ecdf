#  Copyright (c) 2025 Tom Villani, Ph.D.
"""bbview - render BBCode markup as styled text runs.

The pipeline has two stages: a :class:`BBCodeCache` maps source text to a
parsed :class:`BBTree` (parsing each distinct string once), and a
:class:`CascadeRenderer` walks the tree, threading an inherited
:class:`TextStyle` down each path and issuing draw calls against a
:class:`UISink` supplied by the host.

Examples
--------
    >>> from bbview import BBCodeCache, BBCodeViewer, RecordingSink
    >>> sink = RecordingSink()
    >>> BBCodeViewer().show(sink, BBCodeCache(), "[i]hi[/i]")
    >>> sink.runs()[0][1].italics
    True

"""

__version__ = "0.1.0"

from bbview.ast import BBNode, BBTag, BBTree, TreeBuilder
from bbview.cache import BBCodeCache
from bbview.exceptions import (
    BBViewError,
    ConfigError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from bbview.options import BBCodeParserOptions, ViewerOptions
from bbview.parsers.bbcode import BBCodeParser, parse
from bbview.renderers.cascade import CascadeRenderer, render
from bbview.sinks.base import UISink
from bbview.sinks.recording import DrawOp, OpKind, RecordingSink
from bbview.style import Align, Color32, FontFamily, FontId, Stroke, TextStyle
from bbview.viewer import BBCodeViewer

__all__ = [
    "Align",
    "BBCodeCache",
    "BBCodeParser",
    "BBCodeParserOptions",
    "BBCodeViewer",
    "BBNode",
    "BBTag",
    "BBTree",
    "BBViewError",
    "Color32",
    "ConfigError",
    "DrawOp",
    "FontFamily",
    "FontId",
    "InvalidOptionsError",
    "OpKind",
    "ParsingError",
    "RecordingSink",
    "RenderingError",
    "Stroke",
    "TextStyle",
    "TreeBuilder",
    "UISink",
    "ValidationError",
    "ViewerOptions",
    "__version__",
    "parse",
    "render",
]
