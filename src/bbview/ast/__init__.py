#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/ast/__init__.py
"""Arena-style tree for parsed BBCode."""

from bbview.ast.builder import TreeBuilder
from bbview.ast.nodes import TAG_NAMES, BBNode, BBTag, BBTree

__all__ = ["BBNode", "BBTag", "BBTree", "TAG_NAMES", "TreeBuilder"]
