#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/style.py
"""Text style values carried through the render cascade.

:class:`TextStyle` is an immutable record. Each rendering step derives a new
style with :meth:`TextStyle.replace`; the parent's value is never modified,
so sibling subtrees cannot observe each other's overrides.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, ClassVar, Optional

from bbview.constants import MONOSPACE_BODY_SIZE, NAMED_COLORS, PROPORTIONAL_BODY_SIZE

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class Color32:
    """An sRGB colour with alpha, 8 bits per channel."""

    r: int
    g: int
    b: int
    a: int = 255

    LIGHT_GRAY: ClassVar[Color32]
    DARK_GRAY: ClassVar[Color32]
    WHITE: ClassVar[Color32]
    BLACK: ClassVar[Color32]
    TRANSPARENT: ClassVar[Color32]

    @classmethod
    def from_hex(cls, value: str) -> Color32:
        """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional).

        Raises
        ------
        ValueError
            If ``value`` is not a hex colour
        """
        match = _HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Not a hex colour: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_hex(self) -> str:
        """Return ``#rrggbb`` (alpha dropped)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color32.LIGHT_GRAY = Color32(160, 160, 160)
Color32.DARK_GRAY = Color32(96, 96, 96)
Color32.WHITE = Color32(255, 255, 255)
Color32.BLACK = Color32(0, 0, 0)
Color32.TRANSPARENT = Color32(0, 0, 0, 0)


def parse_color(value: Optional[str]) -> Optional[Color32]:
    """Return the colour named by a ``[color=...]`` value, or None if unrecognised."""
    if not value:
        return None
    key = value.strip().lower()
    try:
        return Color32.from_hex(NAMED_COLORS.get(key, key))
    except ValueError:
        logger.debug("Ignoring unrecognised colour value %r", value)
        return None


@dataclass(frozen=True)
class Stroke:
    """A line decoration (underline or strikethrough)."""

    width: float
    color: Color32

    NONE: ClassVar[Stroke]

    @property
    def is_visible(self) -> bool:
        return self.width > 0.0 and self.color.a > 0


Stroke.NONE = Stroke(0.0, Color32.TRANSPARENT)


class FontFamily(Enum):
    PROPORTIONAL = "proportional"
    MONOSPACE = "monospace"


@dataclass(frozen=True)
class FontId:
    """A font family at a point size."""

    size: float
    family: FontFamily = FontFamily.PROPORTIONAL

    @classmethod
    def proportional(cls, size: float) -> FontId:
        return cls(size, FontFamily.PROPORTIONAL)

    @classmethod
    def monospace(cls, size: float) -> FontId:
        return cls(size, FontFamily.MONOSPACE)


class Align(Enum):
    """Placement of a run: horizontal for the alignment tags, vertical for scripts."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TextStyle:
    """Inheritable visual attributes for one text run.

    Parameters
    ----------
    color : Color32
        Foreground colour
    italics : bool
        Italic flag
    underline : Stroke
        Underline decoration; ``Stroke.NONE`` when absent
    strikethrough : Stroke
        Strikethrough decoration; ``Stroke.NONE`` when absent
    font_id : FontId
        Font family and size
    valign : Align
        Alignment of the run
    code : bool
        Whether the run is shown as inline code

    """

    color: Color32 = Color32.LIGHT_GRAY
    italics: bool = False
    underline: Stroke = Stroke.NONE
    strikethrough: Stroke = Stroke.NONE
    font_id: FontId = FontId.proportional(PROPORTIONAL_BODY_SIZE)
    valign: Align = Align.BOTTOM
    code: bool = False

    @classmethod
    def default(cls, dark_mode: bool = True) -> TextStyle:
        """Return the root style for a dark or light background."""
        return cls(color=body_color(dark_mode))

    @classmethod
    def code_span(cls, dark_mode: bool = True) -> TextStyle:
        """Return the fixed style for ``[code]`` runs."""
        return cls(color=body_color(dark_mode), font_id=FontId.monospace(MONOSPACE_BODY_SIZE), code=True)

    def replace(self, **changes: Any) -> TextStyle:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


def body_color(dark_mode: bool) -> Color32:
    """Default text colour for the given background."""
    return Color32.LIGHT_GRAY if dark_mode else Color32.DARK_GRAY


def strong_color(dark_mode: bool) -> Color32:
    """Emphasised (bold) text colour for the given background."""
    return Color32.WHITE if dark_mode else Color32.BLACK
