"""Renderers drawing parsed trees onto sinks."""

from bbview.renderers.base import BaseRenderer
from bbview.renderers.cascade import CascadeRenderer, render
from bbview.renderers.rules import STYLE_OVERRIDES, RenderContext, TagRule, default_rules

__all__ = ["BaseRenderer", "CascadeRenderer", "RenderContext", "STYLE_OVERRIDES", "TagRule", "default_rules", "render"]
