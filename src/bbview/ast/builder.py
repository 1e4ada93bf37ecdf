#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/ast/builder.py
"""Stack-based construction of BBCode trees.

The builder keeps a stack of open nodes. Text goes into the innermost open
node: as its own ``text`` while it has no children yet, or as a new plain
text child otherwise. Nodes are appended to a single table, so a child's
index is always greater than its parent's.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from bbview.ast.nodes import BBNode, BBTag, BBTree

logger = logging.getLogger(__name__)


@dataclass
class _PendingNode:
    tag: BBTag
    name: str
    value: Optional[str]
    parent: Optional[int]
    text: str = ""
    children: list[int] = field(default_factory=list)


class TreeBuilder:
    """Incrementally build a :class:`BBTree`.

    The root node (index 0) is a plain text node that is always open.

    Examples
    --------
        >>> builder = TreeBuilder()
        >>> _ = builder.open(BBTag.BOLD, "b")
        >>> builder.append_text("hi")
        >>> builder.close_innermost()
        >>> tree = builder.build()
        >>> tree.get_node(1).text
        'hi'

    """

    def __init__(self) -> None:
        """Create a builder holding only the root node."""
        self._pending: list[_PendingNode] = [_PendingNode(tag=BBTag.NONE, name="", value=None, parent=None)]
        self._stack: list[int] = [0]
        self._built = False

    @property
    def depth(self) -> int:
        """Number of open nodes below the root."""
        return len(self._stack) - 1

    @property
    def current(self) -> int:
        """Index of the innermost open node."""
        return self._stack[-1]

    def open_names(self) -> list[str]:
        """Return the source names of the open nodes, outermost first (root excluded)."""
        return [self._pending[i].name for i in self._stack[1:]]

    def open(self, tag: BBTag, name: str, value: Optional[str] = None) -> int:
        """Open a new node as the last child of the current node and return its index."""
        self._check_not_built()
        parent = self.current
        index = len(self._pending)
        self._pending.append(_PendingNode(tag=tag, name=name, value=value, parent=parent))
        self._pending[parent].children.append(index)
        self._stack.append(index)
        return index

    def append_text(self, text: str) -> None:
        """Add text to the current node."""
        self._check_not_built()
        if not text:
            return
        node = self._pending[self.current]
        if not node.children:
            node.text += text
            return
        last = self._pending[node.children[-1]]
        if last.tag is BBTag.NONE and not last.children:
            # merge adjacent text runs
            last.text += text
            return
        index = len(self._pending)
        self._pending.append(_PendingNode(tag=BBTag.NONE, name="", value=None, parent=self.current, text=text))
        node.children.append(index)

    def close_innermost(self) -> None:
        """Close the innermost open node. Closing the root is a no-op."""
        if len(self._stack) > 1:
            self._stack.pop()

    def find_open(self, name: str) -> Optional[int]:
        """Return the stack position of the innermost open node named ``name``."""
        for position in range(len(self._stack) - 1, 0, -1):
            if self._pending[self._stack[position]].name == name:
                return position
        return None

    def close_to(self, position: int) -> list[str]:
        """Close every open node from the top of the stack down to ``position``.

        Returns the names of the nodes closed implicitly (all but the last).
        """
        closed: list[str] = []
        while len(self._stack) > position:
            closed.append(self._pending[self._stack.pop()].name)
        return closed[:-1]

    def build(self) -> BBTree:
        """Freeze the pending nodes into a :class:`BBTree`."""
        self._check_not_built()
        self._built = True
        nodes = [
            BBNode(
                index=i,
                tag=p.tag,
                text=p.text,
                value=p.value,
                children=tuple(p.children),
                parent=p.parent,
                name=p.name,
            )
            for i, p in enumerate(self._pending)
        ]
        logger.debug("Built BBTree with %d nodes", len(nodes))
        return BBTree(nodes, root=0)

    def _check_not_built(self) -> None:
        if self._built:
            raise RuntimeError("TreeBuilder.build() has already been called")
