#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/viewer.py
"""Top-level entry point tying the parse cache, renderer and sink together."""

from __future__ import annotations

from bbview.cache import BBCodeCache
from bbview.options.viewer import ViewerOptions
from bbview.renderers.cascade import CascadeRenderer
from bbview.sinks.base import UISink
from bbview.style import TextStyle


class BBCodeViewer:
    """Display BBCode text on a sink.

    Parameters
    ----------
    options : ViewerOptions or None, default = None
        Rendering options, used when ``renderer`` is not given
    renderer : CascadeRenderer, optional
        Renderer to use; built from ``options`` by default

    Examples
    --------
        >>> from bbview.sinks.recording import RecordingSink
        >>> viewer, cache, sink = BBCodeViewer(), BBCodeCache(), RecordingSink()
        >>> viewer.show(sink, cache, "[url=https://example.com]site[/url]")
        >>> [(op.text, op.target) for op in sink.ops if op.target]
        [('site', 'https://example.com')]

    """

    def __init__(self, options: ViewerOptions | None = None, renderer: CascadeRenderer | None = None):
        """Store the renderer."""
        self.renderer = renderer if renderer is not None else CascadeRenderer(options)

    def show(self, sink: UISink, cache: BBCodeCache, source: str) -> None:
        """Parse ``source`` through ``cache`` and draw it onto ``sink``."""
        tree = cache.get_tree(source)
        self.renderer.render(sink, tree, tree.root, TextStyle.default(sink.dark_mode))
