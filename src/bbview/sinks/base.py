#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/sinks/base.py
"""Abstract drawing surface for the cascade renderer.

A sink is the host UI seen from the renderer: it receives labels, styled
runs and hyperlinks, and opens and closes layout groups. How anything ends
up on screen is entirely the sink's business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from bbview.constants import DEFAULT_DARK_MODE
from bbview.style import TextStyle


class UISink(ABC):
    """Abstract base class for render targets.

    Layout groups are opened and closed in strictly nested pairs. The
    :meth:`collapsing`, :meth:`vertical` and :meth:`horizontal` context
    managers guarantee the closing call even if drawing the body raises.

    Parameters
    ----------
    dark_mode : bool, default True
        Whether the host draws on a dark background. Decides the default and
        emphasised text colours.

    """

    def __init__(self, dark_mode: bool = DEFAULT_DARK_MODE):
        """Store the host's colour scheme."""
        self._dark_mode = dark_mode

    @property
    def dark_mode(self) -> bool:
        """Whether the host uses a dark background."""
        return self._dark_mode

    @abstractmethod
    def label(self, text: str) -> None:
        """Draw unstyled text."""

    @abstractmethod
    def styled_label(self, text: str, style: TextStyle) -> None:
        """Draw one text run with ``style``."""

    @abstractmethod
    def hyperlink(self, display: str, target: str) -> None:
        """Draw a clickable run showing ``display`` that opens ``target``."""

    @abstractmethod
    def begin_collapsing(self, title: str, group_id: str, default_open: bool = True) -> None:
        """Open a collapsible group headed by ``title``."""

    @abstractmethod
    def end_collapsing(self) -> None:
        """Close the innermost collapsible group."""

    @abstractmethod
    def begin_vertical(self) -> None:
        """Open a group whose items are stacked top to bottom."""

    @abstractmethod
    def end_vertical(self) -> None:
        """Close the innermost vertical group."""

    @abstractmethod
    def begin_horizontal(self) -> None:
        """Open a group whose items are laid out left to right."""

    @abstractmethod
    def end_horizontal(self) -> None:
        """Close the innermost horizontal group."""

    @contextmanager
    def collapsing(self, title: str, group_id: str, default_open: bool = True) -> Iterator[None]:
        self.begin_collapsing(title, group_id, default_open)
        try:
            yield
        finally:
            self.end_collapsing()

    @contextmanager
    def vertical(self) -> Iterator[None]:
        self.begin_vertical()
        try:
            yield
        finally:
            self.end_vertical()

    @contextmanager
    def horizontal(self) -> Iterator[None]:
        self.begin_horizontal()
        try:
            yield
        finally:
            self.end_horizontal()
