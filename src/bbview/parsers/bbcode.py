#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/parsers/bbcode.py
"""BBCode to tree tagger.

This module turns BBCode (Bulletin Board Code) markup into a
:class:`~bbview.ast.BBTree`. The tagger is a single left-to-right scan over
the tag pattern driving a :class:`~bbview.ast.TreeBuilder`; it never
recurses, so pathological nesting cannot exhaust the call stack.

In its default mode the parser is total: any input yields a tree.
Unrecognised tags become ``UNKNOWN`` nodes, unmatched closing tags are kept
as literal text and unclosed tags are closed at the end of the input.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from bbview.ast import TAG_NAMES, BBTag, BBTree, TreeBuilder
from bbview.constants import ORDERED_LIST_VALUES, RAW_CONTENT_TAGS
from bbview.exceptions import ParsingError
from bbview.options.bbcode import BBCodeParserOptions
from bbview.parsers.base import BaseParser

logger = logging.getLogger(__name__)

LIST_ITEM_MARKER = "*"


class BBCodeParser(BaseParser):
    """Convert BBCode markup to a :class:`BBTree`.

    Supported BBCode tags include:
    - Formatting: [b], [i], [u], [s], [sup], [sub], [size=N], [color=...]
    - Alignment: [center], [left], [right]
    - Links: [url], [url=...], [email]
    - Lists: [list], [list=1], [ol], [ul], [li], [*]
    - Blocks: [quote], [spoiler], [code], [pre], [blur]
    - Tables: [table], [tr], [th], [td]
    - Media placeholders: [img], [youtube]

    Parameters
    ----------
    options : BBCodeParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = BBCodeParser()
        >>> tree = parser.parse("[b]Bold[/b] and [i]italic[/i] text")
        >>> [node.tag.value for node in tree]
        ['none', 'bold', 'none', 'italic', 'none']

    """

    # Regex pattern for BBCode tags
    TAG_PATTERN = re.compile(r"\[(/?)([a-zA-Z][a-zA-Z0-9_-]*|\*)(?:=([^\]\[]*))?\]")

    def __init__(self, options: BBCodeParserOptions | None = None):
        """Initialize the BBCode parser with options."""
        BaseParser._validate_options_type(options, BBCodeParserOptions, "bbcode")
        options = options or BBCodeParserOptions()
        super().__init__(options)
        self.options: BBCodeParserOptions = options

    def parse(self, text: str) -> BBTree:
        """Parse BBCode input into a tree.

        Parameters
        ----------
        text : str
            BBCode source

        Returns
        -------
        BBTree
            Parsed tree rooted at a plain text node (index 0)

        Raises
        ------
        ParsingError
            If the markup is malformed and strict mode is enabled

        """
        source = text.replace("\r\n", "\n").replace("\r", "\n")
        builder = TreeBuilder()
        pos = 0

        while pos < len(source):
            match = self.TAG_PATTERN.search(source, pos)
            if not match:
                builder.append_text(source[pos:])
                break

            if match.start() > pos:
                builder.append_text(source[pos : match.start()])

            is_closing = match.group(1) == "/"
            name = match.group(2).lower()
            value = self._clean_value(match.group(3))

            if is_closing:
                self._handle_closing(builder, match, name)
                pos = match.end()
            elif name in RAW_CONTENT_TAGS:
                pos = self._handle_raw(builder, source, match, name, value)
            else:
                self._handle_opening(builder, match, name, value)
                pos = match.end()

        unclosed = [name for name in builder.open_names() if name != LIST_ITEM_MARKER]
        if unclosed:
            if self.options.strict_mode:
                raise ParsingError(f"Unclosed tags at end of input: {', '.join(unclosed)}", position=len(source))
            logger.debug("Closing unclosed tags at end of input: %s", unclosed)

        return builder.build()

    def _handle_opening(self, builder: TreeBuilder, match: re.Match[str], name: str, value: Optional[str]) -> None:
        """Open a node for an opening tag, or keep the tag as text when too deep."""
        if name == LIST_ITEM_MARKER and builder.open_names()[-1:] == [LIST_ITEM_MARKER]:
            # [*] implicitly ends the previous item
            builder.close_innermost()

        if builder.depth >= self.options.max_nesting_depth:
            logger.debug("Nesting depth %d reached; keeping [%s] as text", builder.depth, name)
            builder.append_text(match.group(0))
            return

        builder.open(self._resolve_tag(name, value), name, value)

    def _handle_closing(self, builder: TreeBuilder, match: re.Match[str], name: str) -> None:
        """Close the innermost open tag named ``name`` and everything opened inside it."""
        position = builder.find_open(name)
        if position is None:
            if self.options.strict_mode:
                raise ParsingError(f"Unmatched closing tag [/{name}]", position=match.start())
            logger.debug("Unmatched closing tag [/%s] at %d kept as text", name, match.start())
            builder.append_text(match.group(0))
            return

        implicitly_closed = [n for n in builder.close_to(position) if n != LIST_ITEM_MARKER]
        if implicitly_closed and self.options.strict_mode:
            raise ParsingError(
                f"[/{name}] closes unterminated tags: {', '.join(implicitly_closed)}", position=match.start()
            )

    def _handle_raw(
        self, builder: TreeBuilder, source: str, match: re.Match[str], name: str, value: Optional[str]
    ) -> int:
        """Open a raw-content tag and consume its body verbatim.

        Returns
        -------
        int
            Position to resume scanning from

        """
        closing = re.compile(rf"\[/{re.escape(name)}\]", re.IGNORECASE).search(source, match.end())
        if closing is None:
            if self.options.strict_mode:
                raise ParsingError(f"Unclosed [{name}] tag", position=match.start())
            body, resume = source[match.end() :], len(source)
        else:
            body, resume = source[match.end() : closing.start()], closing.end()

        if builder.depth >= self.options.max_nesting_depth:
            builder.append_text(source[match.start() : resume])
            return resume

        builder.open(self._resolve_tag(name, value), name, value)
        builder.append_text(body)
        builder.close_innermost()
        return resume

    @staticmethod
    def _resolve_tag(name: str, value: Optional[str]) -> BBTag:
        if name == "list" and value in ORDERED_LIST_VALUES:
            return BBTag.LIST_ORDERED
        return TAG_NAMES.get(name, BBTag.UNKNOWN)

    @staticmethod
    def _clean_value(raw: Optional[str]) -> Optional[str]:
        """Strip whitespace and one pair of surrounding quotes from a tag value."""
        if raw is None:
            return None
        value = raw.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        return value


def parse(text: str, options: BBCodeParserOptions | None = None) -> BBTree:
    """Parse BBCode ``text`` with a fresh :class:`BBCodeParser`."""
    return BBCodeParser(options).parse(text)
