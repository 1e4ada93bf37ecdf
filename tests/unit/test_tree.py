#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the arena tree and its builder."""

import pytest

from bbview.ast import BBTag, BBTree, TreeBuilder


@pytest.mark.unit
class TestTreeBuilder:
    """Tests for TreeBuilder."""

    def test_root_only(self) -> None:
        """Test that a fresh builder holds only the root."""
        tree = TreeBuilder().build()

        assert len(tree) == 1
        assert tree.root == 0
        assert tree.get_node(0).tag is BBTag.NONE

    def test_text_merges_into_trailing_text_child(self) -> None:
        """Test that consecutive text after a child forms one text node."""
        builder = TreeBuilder()
        builder.open(BBTag.BOLD, "b")
        builder.close_innermost()
        builder.append_text("a")
        builder.append_text("b")
        tree = builder.build()

        assert len(tree) == 3
        assert tree.get_node(2).text == "ab"

    def test_close_to_reports_implicit_closes(self) -> None:
        """Test that close_to returns the names closed on the way."""
        builder = TreeBuilder()
        builder.open(BBTag.BOLD, "b")
        builder.open(BBTag.ITALIC, "i")
        builder.open(BBTag.UNDERLINE, "u")

        position = builder.find_open("b")
        assert builder.close_to(position) == ["u", "i"]
        assert builder.depth == 0

    def test_closing_root_is_noop(self) -> None:
        """Test that the root cannot be closed."""
        builder = TreeBuilder()
        builder.close_innermost()

        assert builder.current == 0

    def test_build_once(self) -> None:
        """Test that a builder cannot be reused after build()."""
        builder = TreeBuilder()
        builder.build()

        with pytest.raises(RuntimeError):
            builder.append_text("x")


@pytest.mark.unit
class TestBBTree:
    """Tests for BBTree traversal helpers."""

    @pytest.fixture
    def tree(self, parser) -> BBTree:
        return parser.parse("a[b]b[i]c[/i][/b][u]d[/u]")

    def test_walk_is_preorder(self, tree) -> None:
        """Test pre-order traversal with depths."""
        assert [(node.index, depth) for node, depth in tree.walk()] == [(0, 0), (1, 1), (2, 2), (3, 1)]

    def test_depth(self, tree) -> None:
        """Test the maximum depth."""
        assert tree.depth() == 2

    def test_to_dict(self, tree) -> None:
        """Test plain-data export."""
        data = tree.to_dict()

        assert data["root"] == 0
        assert data["nodes"][1] == {
            "index": 1,
            "tag": "bold",
            "name": "b",
            "text": "b",
            "value": None,
            "children": [2],
        }

    def test_nodes_are_immutable(self, tree) -> None:
        """Test that nodes cannot be modified after parsing."""
        with pytest.raises(AttributeError):
            tree.get_node(0).text = "changed"  # type: ignore[misc]
