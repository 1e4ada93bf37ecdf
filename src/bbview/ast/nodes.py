#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/ast/nodes.py
"""Node and tree types for parsed BBCode.

A parsed document is stored as an arena: one flat table of :class:`BBNode`
records per :class:`BBTree`, with children referenced by integer index into
that table. Nodes never hold references to other nodes, so a tree has no
reference cycles and can be shared freely once built.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class BBTag(Enum):
    """Closed set of formatting kinds a node can carry."""

    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    FONT_SIZE = "font_size"
    FONT_COLOR = "font_color"
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    QUOTE = "quote"
    SPOILER = "spoiler"
    LINK = "link"
    EMAIL = "email"
    IMAGE = "image"
    LIST_ORDERED = "list_ordered"
    LIST_UNORDERED = "list_unordered"
    LIST_ITEM = "list_item"
    CODE = "code"
    PREFORMATTED = "preformatted"
    TABLE = "table"
    TABLE_HEADING = "table_heading"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    YOUTUBE = "youtube"
    BLUR = "blur"
    UNKNOWN = "unknown"


# Source tag names (lowercase) mapped to their BBTag
TAG_NAMES: dict[str, BBTag] = {
    "b": BBTag.BOLD,
    "i": BBTag.ITALIC,
    "u": BBTag.UNDERLINE,
    "s": BBTag.STRIKETHROUGH,
    "strike": BBTag.STRIKETHROUGH,
    "size": BBTag.FONT_SIZE,
    "color": BBTag.FONT_COLOR,
    "colour": BBTag.FONT_COLOR,
    "center": BBTag.CENTER,
    "left": BBTag.LEFT,
    "right": BBTag.RIGHT,
    "sup": BBTag.SUPERSCRIPT,
    "sub": BBTag.SUBSCRIPT,
    "quote": BBTag.QUOTE,
    "spoiler": BBTag.SPOILER,
    "url": BBTag.LINK,
    "link": BBTag.LINK,
    "email": BBTag.EMAIL,
    "img": BBTag.IMAGE,
    "ol": BBTag.LIST_ORDERED,
    "ul": BBTag.LIST_UNORDERED,
    "list": BBTag.LIST_UNORDERED,
    "li": BBTag.LIST_ITEM,
    "*": BBTag.LIST_ITEM,
    "code": BBTag.CODE,
    "pre": BBTag.PREFORMATTED,
    "table": BBTag.TABLE,
    "th": BBTag.TABLE_HEADING,
    "tr": BBTag.TABLE_ROW,
    "td": BBTag.TABLE_CELL,
    "youtube": BBTag.YOUTUBE,
    "blur": BBTag.BLUR,
}


@dataclass(frozen=True)
class BBNode:
    """One element of a parsed BBCode tree.

    Parameters
    ----------
    index : int
        Position of this node in its tree's node table
    tag : BBTag
        Formatting kind
    text : str
        Literal text owned by this node (text before its first child)
    value : str or None
        Tag parameter, e.g. the URL in ``[url=...]`` or the level in ``[size=3]``
    children : tuple of int
        Indices of child nodes, in document order
    parent : int or None
        Index of the parent node; None for the root
    name : str
        Tag name as written in the source (lowercase); empty for text nodes

    """

    index: int
    tag: BBTag
    text: str = ""
    value: Optional[str] = None
    children: tuple[int, ...] = ()
    parent: Optional[int] = None
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the node as plain data."""
        return {
            "index": self.index,
            "tag": self.tag.value,
            "name": self.name,
            "text": self.text,
            "value": self.value,
            "children": list(self.children),
        }


class BBTree:
    """Immutable node table for one parsed source string.

    Parameters
    ----------
    nodes : sequence of BBNode
        The node table; ``nodes[i].index`` must equal ``i``
    root : int, default 0
        Index of the root node

    Examples
    --------
        >>> from bbview.parsers.bbcode import BBCodeParser
        >>> tree = BBCodeParser().parse("[b]bold[/b]")
        >>> tree.get_node(tree.root).children
        (1,)
        >>> tree.get_node(1).tag
        <BBTag.BOLD: 'bold'>

    """

    __slots__ = ("_nodes", "_root")

    def __init__(self, nodes: tuple[BBNode, ...] | list[BBNode], root: int = 0):
        """Store the node table."""
        self._nodes: tuple[BBNode, ...] = tuple(nodes)
        self._root = root

    @property
    def root(self) -> int:
        """Index of the root node."""
        return self._root

    @property
    def nodes(self) -> tuple[BBNode, ...]:
        """The full node table."""
        return self._nodes

    def get_node(self, index: int) -> BBNode:
        """Return the node at ``index``."""
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[BBNode]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BBTree):
            return NotImplemented
        return self._root == other._root and self._nodes == other._nodes

    def __hash__(self) -> int:
        return hash((self._root, self._nodes))

    def __repr__(self) -> str:
        return f"BBTree(nodes={len(self._nodes)}, root={self._root})"

    def walk(self, start: Optional[int] = None) -> Iterator[tuple[BBNode, int]]:
        """Yield ``(node, depth)`` pairs in pre-order.

        Iterative, so arbitrarily deep trees do not exhaust the call stack.
        """
        first = self._root if start is None else start
        stack: list[tuple[int, int]] = [(first, 0)]
        while stack:
            index, depth = stack.pop()
            node = self._nodes[index]
            yield node, depth
            for child in reversed(node.children):
                stack.append((child, depth + 1))

    def depth(self) -> int:
        """Return the maximum depth of the tree (root is depth 0)."""
        return max((depth for _, depth in self.walk()), default=0)

    def to_dict(self) -> dict[str, Any]:
        """Return the tree as plain data (for debugging output)."""
        return {"root": self._root, "nodes": [node.to_dict() for node in self._nodes]}
