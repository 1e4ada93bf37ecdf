#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/sinks/rich.py
"""Terminal sink drawing through a rich Console.

Runs are collected into rich :class:`~rich.text.Text` lines as the renderer
issues calls, following the group nesting: a vertical group stacks its items
one per line, a horizontal group joins them on one line, and a collapsible
group prints a header with its body indented below it. :meth:`RichSink.flush`
prints the collected lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.text import Text

from bbview.constants import PROPORTIONAL_BODY_SIZE, SCRIPT_FONT_SIZE
from bbview.exceptions import RenderingError
from bbview.sinks.base import UISink
from bbview.style import Align, TextStyle

logger = logging.getLogger(__name__)

COLLAPSE_OPEN = "▼ "
COLLAPSE_CLOSED = "▶ "
INDENT = "  "
CODE_BACKGROUND = "grey23"
LINK_COLOR = "bright_blue"

_JUSTIFY = {Align.LEFT: "left", Align.CENTER: "center", Align.RIGHT: "right"}


def to_rich_style(style: TextStyle, color: bool = True) -> Style:
    """Translate a :class:`TextStyle` into a rich :class:`Style`.

    Font sizes have no terminal equivalent: sizes above the body size are
    drawn bold and sub/superscript sizes are drawn dim.
    """
    size = style.font_id.size
    return Style(
        color=Color.from_rgb(style.color.r, style.color.g, style.color.b) if color else None,
        italic=style.italics,
        underline=style.underline.is_visible,
        strike=style.strikethrough.is_visible,
        bold=size > PROPORTIONAL_BODY_SIZE,
        dim=size <= SCRIPT_FONT_SIZE,
        bgcolor=CODE_BACKGROUND if style.code and color else None,
    )


@dataclass
class _Frame:
    kind: str
    lines: list[Text] = field(default_factory=list)
    title: str = ""
    default_open: bool = True

    def add(self, text: Text) -> None:
        if self.kind == "horizontal":
            if not self.lines:
                self.lines.append(Text())
            self.lines[-1].append_text(text)
        else:
            self.lines.append(text)

    def extend(self, lines: list[Text]) -> None:
        if not lines:
            return
        if self.kind != "horizontal" or not self.lines:
            self.lines.extend(lines)
            return
        # continuation lines line up under the start of the nested block
        offset = self.lines[-1].cell_len
        self.lines[-1].append_text(lines[0])
        for line in lines[1:]:
            self.lines.append(Text(" " * offset) + line)


class RichSink(UISink):
    """Draw onto a rich :class:`~rich.console.Console`.

    Parameters
    ----------
    console : Console, optional
        Target console; a new stdout console by default
    dark_mode : bool, default True
        Whether the terminal has a dark background
    color : bool, default True
        Whether to emit colours (styles such as italic are kept either way)

    Examples
    --------
        >>> from bbview import BBCodeCache, BBCodeViewer
        >>> sink = RichSink(Console(record=True, width=40))
        >>> BBCodeViewer().show(sink, BBCodeCache(), "[b]hello[/b]")
        >>> [line.plain for line in sink.lines()]
        ['hello']

    """

    def __init__(self, console: Optional[Console] = None, dark_mode: bool = True, color: bool = True):
        """Create the sink with an empty root frame."""
        super().__init__(dark_mode)
        self.console = console if console is not None else Console()
        self.color = color
        self._stack: list[_Frame] = [_Frame("vertical")]

    def label(self, text: str) -> None:
        self._add_text(text, Style())

    def styled_label(self, text: str, style: TextStyle) -> None:
        self._add_text(text, to_rich_style(style, self.color), _JUSTIFY.get(style.valign))

    def hyperlink(self, display: str, target: str) -> None:
        link_style = Style(link=target, underline=True, color=LINK_COLOR if self.color else None)
        self._stack[-1].add(Text(display, style=link_style))

    def begin_collapsing(self, title: str, group_id: str, default_open: bool = True) -> None:
        self._stack.append(_Frame("collapsing", title=title.strip(), default_open=default_open))

    def end_collapsing(self) -> None:
        frame = self._pop("collapsing")
        marker = COLLAPSE_OPEN if frame.default_open else COLLAPSE_CLOSED
        lines = [Text(marker + frame.title, style=Style(bold=True))]
        if frame.default_open:
            lines.extend(Text(INDENT) + line for line in frame.lines)
        self._stack[-1].extend(lines)

    def begin_vertical(self) -> None:
        self._stack.append(_Frame("vertical"))

    def end_vertical(self) -> None:
        frame = self._pop("vertical")
        self._stack[-1].extend(frame.lines)

    def begin_horizontal(self) -> None:
        self._stack.append(_Frame("horizontal"))

    def end_horizontal(self) -> None:
        frame = self._pop("horizontal")
        self._stack[-1].extend(frame.lines)

    def lines(self) -> list[Text]:
        """Lines collected so far at the top level."""
        if len(self._stack) != 1:
            logger.warning("Reading lines with %d layout group(s) still open", len(self._stack) - 1)
        return list(self._stack[0].lines)

    def flush(self) -> None:
        """Print the collected lines and start over."""
        for line in self.lines():
            self.console.print(line)
        self._stack = [_Frame("vertical")]

    def _add_text(self, text: str, style: Style, justify: Optional[str] = None) -> None:
        frame = self._stack[-1]
        if frame.kind == "horizontal":
            # a horizontal row stays on one line
            frame.add(Text(text.replace("\n", " "), style=style))
            return
        for part in text.split("\n"):
            if part.strip():
                frame.add(Text(part, style=style, justify=justify))  # type: ignore[arg-type]

    def _pop(self, kind: str) -> _Frame:
        if len(self._stack) == 1 or self._stack[-1].kind != kind:
            raise RenderingError(f"end_{kind}() called without a matching begin_{kind}()")
        return self._stack.pop()
