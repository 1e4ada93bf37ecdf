#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/renderers/cascade.py
"""Style-cascade rendering of BBCode trees.

This module provides the CascadeRenderer class, which walks a
:class:`~bbview.ast.BBTree` from a start node and issues draw calls against
a :class:`~bbview.sinks.base.UISink`. A :class:`~bbview.style.TextStyle` is
threaded down every recursion path: each node derives its children's style
from the style it received plus its own tag, so the nearest ancestor wins
for any attribute and siblings never see each other's overrides.

"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from bbview.ast import BBTag, BBTree
from bbview.constants import TRUNCATION_MARKER
from bbview.options.viewer import ViewerOptions
from bbview.renderers.base import BaseRenderer
from bbview.renderers.rules import RenderContext, TagRule, default_rules
from bbview.sinks.base import UISink
from bbview.style import TextStyle

logger = logging.getLogger(__name__)


class CascadeRenderer(BaseRenderer):
    """Render BBCode trees onto a sink with inherited text styles.

    Parameters
    ----------
    options : ViewerOptions or None, default = None
        Rendering options
    rules : mapping of BBTag to TagRule, optional
        Replacement rules for individual tags; unlisted tags keep their
        default rule

    Examples
    --------
        >>> from bbview.parsers.bbcode import BBCodeParser
        >>> from bbview.sinks.recording import RecordingSink
        >>> tree = BBCodeParser().parse("[b]bold [i]both[/i][/b]")
        >>> sink = RecordingSink()
        >>> CascadeRenderer().render(sink, tree)
        >>> [(text, style.italics) for text, style in sink.runs()]
        [('bold ', False), ('both', True)]

    """

    def __init__(self, options: ViewerOptions | None = None, rules: Optional[Mapping[BBTag, TagRule]] = None):
        """Initialize the renderer with options and the tag rule table."""
        BaseRenderer._validate_options_type(options, ViewerOptions, "cascade")
        options = options or ViewerOptions()
        super().__init__(options)
        self.options: ViewerOptions = options
        self._rules = default_rules()
        if rules:
            self._rules.update(rules)

    def rule_for(self, tag: BBTag) -> TagRule:
        """Return the rule handling ``tag``."""
        return self._rules[tag]

    def render(
        self,
        sink: UISink,
        tree: BBTree,
        node_index: Optional[int] = None,
        inherited_style: Optional[TextStyle] = None,
    ) -> None:
        """Draw the subtree rooted at ``node_index`` onto ``sink``.

        Parameters
        ----------
        sink : UISink
            Drawing target
        tree : BBTree
            Parsed tree; never modified
        node_index : int, optional
            Start node; defaults to the tree root
        inherited_style : TextStyle, optional
            Style the start node inherits; defaults to the sink's root style

        """
        ctx = RenderContext(options=self.options, dark_mode=sink.dark_mode)
        start = tree.root if node_index is None else node_index
        style = inherited_style if inherited_style is not None else TextStyle.default(sink.dark_mode)

        self.render_node(sink, tree, start, style, ctx, 0)

        if ctx.truncated:
            logger.warning(
                "Markup nested deeper than %d levels; %d subtree(s) were truncated",
                self.options.max_depth,
                ctx.truncated,
            )

    def render_node(
        self, sink: UISink, tree: BBTree, index: int, inherited: TextStyle, ctx: RenderContext, depth: int
    ) -> None:
        """Render one node and, unless its rule owns them, its children."""
        if depth > self.options.max_depth:
            ctx.truncated += 1
            sink.label(TRUNCATION_MARKER)
            return

        node = tree.get_node(index)
        rule = self._rules[node.tag]
        style = rule.style_for(node, inherited, ctx)
        rule.emit(self, sink, tree, node, style, ctx, depth)

        if rule.owns_children:
            return
        for child in node.children:
            self.render_node(sink, tree, child, style, ctx, depth + 1)


def render(
    sink: UISink,
    tree: BBTree,
    node_index: Optional[int] = None,
    inherited_style: Optional[TextStyle] = None,
    options: ViewerOptions | None = None,
) -> None:
    """Render ``tree`` onto ``sink`` with a default :class:`CascadeRenderer`."""
    CascadeRenderer(options).render(sink, tree, node_index, inherited_style)
