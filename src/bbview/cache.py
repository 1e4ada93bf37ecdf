#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/cache.py
"""In-memory parse cache.

Maps source strings to parsed trees so that a UI redrawing the same text on
every frame parses it only once.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from bbview.ast import BBTree
from bbview.parsers.bbcode import BBCodeParser

logger = logging.getLogger(__name__)

ParseFunc = Callable[[str], BBTree]


class BBCodeCache:
    """Memoise ``source text -> BBTree``.

    Keys are the exact source strings (case and whitespace sensitive). Each
    distinct key is parsed at most once for the lifetime of the cache; there
    is no eviction.

    The cache is not synchronised. Hosts that render from several threads
    must serialise calls to :meth:`get_tree`.

    Parameters
    ----------
    parser : callable, optional
        Any ``str -> BBTree`` callable. Defaults to a :class:`BBCodeParser`
        with default options.

    Examples
    --------
        >>> cache = BBCodeCache()
        >>> cache.get_tree("[b]hi[/b]") is cache.get_tree("[b]hi[/b]")
        True

    """

    def __init__(self, parser: Optional[ParseFunc] = None):
        """Create an empty cache around ``parser``."""
        self._parser: ParseFunc = parser if parser is not None else BBCodeParser()
        self._trees: dict[str, BBTree] = {}
        self.hits = 0
        self.misses = 0

    def get_tree(self, source: str) -> BBTree:
        """Return the tree for ``source``, parsing it on first use.

        Errors raised by the parser propagate and nothing is stored.
        """
        tree = self._trees.get(source)
        if tree is not None:
            self.hits += 1
            return tree

        tree = self._parser(source)
        self._trees[source] = tree
        self.misses += 1
        logger.debug("Parsed %d characters into %d nodes (cache size %d)", len(source), len(tree), len(self._trees))
        return tree

    def __contains__(self, source: object) -> bool:
        return source in self._trees

    def __len__(self) -> int:
        return len(self._trees)

    def clear(self) -> None:
        """Drop every cached tree and reset the counters."""
        self._trees.clear()
        self.hits = 0
        self.misses = 0
