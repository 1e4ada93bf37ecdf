"""Option dataclasses for the bbview parser and renderer."""

from bbview.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from bbview.options.bbcode import BBCodeParserOptions
from bbview.options.viewer import ViewerOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "BBCodeParserOptions",
    "CloneFrozenMixin",
    "ViewerOptions",
]
