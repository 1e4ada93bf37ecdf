#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/renderers/rules.py
"""Per-tag rendering rules.

Every :class:`~bbview.ast.BBTag` is handled by one :class:`TagRule`. A rule
answers two questions for the cascade renderer:

- which style its node and its children see (:meth:`TagRule.style_for`,
  identity by default), computed from the node's own tag and the inherited
  style only;
- whether it draws its own children (:attr:`TagRule.owns_children`). When it
  does not, the renderer recurses into every child afterwards.

The inline style overrides live in :data:`STYLE_OVERRIDES`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping

from bbview.ast import BBNode, BBTag, BBTree
from bbview.constants import (
    FONT_SIZE_LADDER,
    ORDERED_LIST_LABEL,
    SCRIPT_FONT_SIZE,
    STROKE_WIDTH,
    UNORDERED_LIST_BULLET,
)
from bbview.options.viewer import ViewerOptions
from bbview.sinks.base import UISink
from bbview.style import Align, FontId, Stroke, TextStyle, parse_color, strong_color

if TYPE_CHECKING:
    from bbview.renderers.cascade import CascadeRenderer


@dataclass
class RenderContext:
    """Per-call state shared by every rule during one render pass."""

    options: ViewerOptions
    dark_mode: bool
    truncated: int = 0


StyleOverride = Callable[[BBNode, TextStyle, RenderContext], TextStyle]


# =============================================================================
# Style attribute table
# =============================================================================


def _bold(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    return style.replace(color=strong_color(ctx.dark_mode))


def _italic(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    return style.replace(italics=True)


def _underline(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    return style.replace(underline=Stroke(STROKE_WIDTH, style.color))


def _strikethrough(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    return style.replace(strikethrough=Stroke(STROKE_WIDTH, style.color))


def _font_size(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    size = FONT_SIZE_LADDER.get(node.value or "")
    if size is None:
        return style
    return style.replace(font_id=FontId.proportional(size))


def _font_color(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    if not ctx.options.apply_font_color:
        return style
    color = parse_color(node.value)
    return style if color is None else style.replace(color=color)


def _align(align: Align) -> StyleOverride:
    def override(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
        return style.replace(valign=align)

    return override


def _script(align: Align) -> StyleOverride:
    def override(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
        return style.replace(font_id=FontId.proportional(SCRIPT_FONT_SIZE), valign=align)

    return override


def _identity(node: BBNode, style: TextStyle, ctx: RenderContext) -> TextStyle:
    return style


STYLE_OVERRIDES: Mapping[BBTag, StyleOverride] = {
    BBTag.BOLD: _bold,
    BBTag.ITALIC: _italic,
    BBTag.UNDERLINE: _underline,
    BBTag.STRIKETHROUGH: _strikethrough,
    BBTag.FONT_SIZE: _font_size,
    BBTag.FONT_COLOR: _font_color,
    BBTag.CENTER: _align(Align.CENTER),
    BBTag.LEFT: _align(Align.LEFT),
    BBTag.RIGHT: _align(Align.RIGHT),
    BBTag.SUPERSCRIPT: _script(Align.TOP),
    BBTag.SUBSCRIPT: _script(Align.BOTTOM),
    BBTag.LIST_ITEM: _identity,
}


# =============================================================================
# Rules
# =============================================================================


class TagRule(ABC):
    """Base rule: no style change, children rendered by the renderer."""

    owns_children = False

    def style_for(self, node: BBNode, inherited: TextStyle, ctx: RenderContext) -> TextStyle:
        return inherited

    @abstractmethod
    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        """Draw ``node`` onto ``sink`` using its computed ``style``."""


class PlainTextRule(TagRule):
    """Untagged text: an unstyled label."""

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        sink.label(node.text)


class PlainLabelRule(TagRule):
    """Block and placeholder tags drawn as their raw text.

    The node's own text is drawn without the inherited style; children still
    receive the inherited style unchanged.
    """

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        sink.label(node.text)


class CodeRule(TagRule):
    """Code spans: a fixed monospace code style, independent of ancestors."""

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        sink.styled_label(node.text, TextStyle.code_span(ctx.dark_mode))


class InlineStyleRule(TagRule):
    """Formatting tags: override part of the style and draw the node's own text with it."""

    def __init__(self, override: StyleOverride):
        self.override = override

    def style_for(self, node: BBNode, inherited: TextStyle, ctx: RenderContext) -> TextStyle:
        return self.override(node, inherited, ctx)

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        # an empty run would still take up a row in the host layout
        if not node.text.strip():
            return
        sink.styled_label(node.text, style)


class LinkRule(TagRule):
    """Hyperlinks. Link text is used as-is; children are not rendered."""

    owns_children = True

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        target = node.value or node.text
        display = node.text or target
        sink.hyperlink(display, target)


class OrderedListRule(TagRule):
    """Collapsible group titled with the node text, one ``"{i}.) "`` row per child."""

    owns_children = True

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        with sink.collapsing(node.text, f"{node.index}_list", default_open=True):
            with sink.vertical():
                for position, child in enumerate(node.children):
                    with sink.horizontal():
                        sink.label(ORDERED_LIST_LABEL.format(index=position))
                        renderer.render_node(sink, tree, child, style, ctx, depth + 1)


class UnorderedListRule(TagRule):
    """Vertical group with an optional title and one bulleted row per child."""

    owns_children = True

    def emit(
        self,
        renderer: CascadeRenderer,
        sink: UISink,
        tree: BBTree,
        node: BBNode,
        style: TextStyle,
        ctx: RenderContext,
        depth: int,
    ) -> None:
        with sink.vertical():
            if node.value:
                sink.label(node.value)
            for child in node.children:
                with sink.horizontal():
                    sink.label(UNORDERED_LIST_BULLET)
                    renderer.render_node(sink, tree, child, style, ctx, depth + 1)


PLAIN_LABEL_TAGS = (
    BBTag.QUOTE,
    BBTag.SPOILER,
    BBTag.IMAGE,
    BBTag.PREFORMATTED,
    BBTag.TABLE,
    BBTag.TABLE_HEADING,
    BBTag.TABLE_ROW,
    BBTag.TABLE_CELL,
    BBTag.YOUTUBE,
    BBTag.BLUR,
    BBTag.EMAIL,
    BBTag.UNKNOWN,
)


def default_rules() -> dict[BBTag, TagRule]:
    """Return a fresh tag -> rule table covering every :class:`BBTag`."""
    rules: dict[BBTag, TagRule] = {
        BBTag.NONE: PlainTextRule(),
        BBTag.LINK: LinkRule(),
        BBTag.LIST_ORDERED: OrderedListRule(),
        BBTag.LIST_UNORDERED: UnorderedListRule(),
        BBTag.CODE: CodeRule(),
    }
    for tag, override in STYLE_OVERRIDES.items():
        rules[tag] = InlineStyleRule(override)
    plain = PlainLabelRule()
    for tag in PLAIN_LABEL_TAGS:
        rules[tag] = plain
    return rules
