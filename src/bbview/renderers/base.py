#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/renderers/base.py
"""Base class for tree renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bbview.ast import BBTree
from bbview.exceptions import InvalidOptionsError
from bbview.options.base import BaseRendererOptions
from bbview.sinks.base import UISink


class BaseRenderer(ABC):
    """Abstract base class for renderers that draw a tree onto a sink.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, sink: UISink, tree: BBTree, *args: Any, **kwargs: Any) -> None:
        """Draw ``tree`` onto ``sink``."""

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
