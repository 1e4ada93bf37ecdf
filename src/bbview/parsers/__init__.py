"""Markup parsers producing :class:`~bbview.ast.BBTree` instances."""

from bbview.parsers.base import BaseParser
from bbview.parsers.bbcode import BBCodeParser, parse

__all__ = ["BaseParser", "BBCodeParser", "parse"]
