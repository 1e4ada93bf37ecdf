#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/sinks/recording.py
"""Sink that records draw operations instead of drawing.

Useful for headless hosts, snapshot tests and the ``--dump-ops`` CLI flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from bbview.sinks.base import UISink
from bbview.style import TextStyle


class OpKind(Enum):
    LABEL = "label"
    STYLED_LABEL = "styled_label"
    HYPERLINK = "hyperlink"
    BEGIN_COLLAPSING = "begin_collapsing"
    END_COLLAPSING = "end_collapsing"
    BEGIN_VERTICAL = "begin_vertical"
    END_VERTICAL = "end_vertical"
    BEGIN_HORIZONTAL = "begin_horizontal"
    END_HORIZONTAL = "end_horizontal"


TEXT_KINDS = (OpKind.LABEL, OpKind.STYLED_LABEL, OpKind.HYPERLINK)


@dataclass(frozen=True)
class DrawOp:
    """One recorded sink call."""

    kind: OpKind
    text: str = ""
    style: Optional[TextStyle] = None
    target: Optional[str] = None
    group_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.kind in TEXT_KINDS or self.kind is OpKind.BEGIN_COLLAPSING:
            data["text"] = self.text
        if self.style is not None:
            data["style"] = {
                "color": self.style.color.to_hex(),
                "italics": self.style.italics,
                "underline": self.style.underline.is_visible,
                "strikethrough": self.style.strikethrough.is_visible,
                "font_size": self.style.font_id.size,
                "font_family": self.style.font_id.family.value,
                "valign": self.style.valign.value,
                "code": self.style.code,
            }
        if self.target is not None:
            data["target"] = self.target
        if self.group_id is not None:
            data["group_id"] = self.group_id
        return data


class RecordingSink(UISink):
    """Record every sink call as a :class:`DrawOp`.

    Examples
    --------
        >>> sink = RecordingSink()
        >>> sink.label("hello")
        >>> sink.labels()
        ['hello']

    """

    def __init__(self, dark_mode: bool = True):
        """Start with an empty operation log."""
        super().__init__(dark_mode)
        self.ops: list[DrawOp] = []

    def label(self, text: str) -> None:
        self.ops.append(DrawOp(OpKind.LABEL, text=text))

    def styled_label(self, text: str, style: TextStyle) -> None:
        self.ops.append(DrawOp(OpKind.STYLED_LABEL, text=text, style=style))

    def hyperlink(self, display: str, target: str) -> None:
        self.ops.append(DrawOp(OpKind.HYPERLINK, text=display, target=target))

    def begin_collapsing(self, title: str, group_id: str, default_open: bool = True) -> None:
        self.ops.append(DrawOp(OpKind.BEGIN_COLLAPSING, text=title, group_id=group_id))

    def end_collapsing(self) -> None:
        self.ops.append(DrawOp(OpKind.END_COLLAPSING))

    def begin_vertical(self) -> None:
        self.ops.append(DrawOp(OpKind.BEGIN_VERTICAL))

    def end_vertical(self) -> None:
        self.ops.append(DrawOp(OpKind.END_VERTICAL))

    def begin_horizontal(self) -> None:
        self.ops.append(DrawOp(OpKind.BEGIN_HORIZONTAL))

    def end_horizontal(self) -> None:
        self.ops.append(DrawOp(OpKind.END_HORIZONTAL))

    def ops_of(self, *kinds: OpKind) -> list[DrawOp]:
        """Return the recorded operations of the given kinds, in order."""
        return [op for op in self.ops if op.kind in kinds]

    def labels(self) -> list[str]:
        """Text of every plain label, in order."""
        return [op.text for op in self.ops_of(OpKind.LABEL)]

    def runs(self) -> list[tuple[str, TextStyle]]:
        """Text and style of every styled run, in order."""
        return [(op.text, op.style) for op in self.ops_of(OpKind.STYLED_LABEL) if op.style is not None]

    def texts(self) -> list[str]:
        """Text of every label, styled run and hyperlink, in order."""
        return [op.text for op in self.ops_of(*TEXT_KINDS)]

    def to_dicts(self) -> list[dict[str, Any]]:
        return [op.to_dict() for op in self.ops]

    def clear(self) -> None:
        self.ops.clear()
