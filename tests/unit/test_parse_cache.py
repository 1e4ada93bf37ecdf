#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the parse cache."""

import pytest

from bbview.ast import BBTag, BBTree
from bbview.cache import BBCodeCache
from bbview.exceptions import ParsingError
from bbview.options import BBCodeParserOptions
from bbview.parsers.bbcode import BBCodeParser


@pytest.mark.unit
class TestBBCodeCache:
    """Tests for BBCodeCache memoisation."""

    def test_parser_called_once_per_source(self, cache, counting_parser) -> None:
        """Test that a repeated source is not parsed again."""
        first = cache.get_tree("[b]hi[/b]")
        second = cache.get_tree("[b]hi[/b]")

        assert counting_parser.calls == ["[b]hi[/b]"]
        assert first is second

    def test_repeated_lookups_are_structurally_identical(self, cache) -> None:
        """Test that repeated lookups return the same node table."""
        source = "[list=1][*][i]a[/i][*]b[/list]"
        first = cache.get_tree(source)
        second = cache.get_tree(source)

        assert len(first) == len(second)
        assert [n.to_dict() for n in first] == [n.to_dict() for n in second]

    def test_keys_are_exact(self, cache, counting_parser) -> None:
        """Test that case and whitespace differences are distinct keys."""
        cache.get_tree("[b]x[/b]")
        cache.get_tree("[B]x[/B]")
        cache.get_tree("[b]x[/b] ")

        assert len(counting_parser.calls) == 3
        assert len(cache) == 3

    def test_hit_and_miss_counters(self, cache) -> None:
        """Test the hit/miss counters."""
        cache.get_tree("a")
        cache.get_tree("a")
        cache.get_tree("b")

        assert cache.misses == 2
        assert cache.hits == 1

    def test_contains_and_clear(self, cache, counting_parser) -> None:
        """Test membership and clearing."""
        cache.get_tree("a")
        assert "a" in cache
        assert "b" not in cache

        cache.clear()

        assert len(cache) == 0
        assert cache.hits == cache.misses == 0
        cache.get_tree("a")
        assert counting_parser.calls == ["a", "a"]

    def test_empty_source(self, cache) -> None:
        """Test that the empty string is a valid key."""
        tree = cache.get_tree("")

        assert len(tree) == 1
        assert cache.get_tree("") is tree

    def test_default_parser(self) -> None:
        """Test that the cache parses BBCode by default."""
        tree = BBCodeCache().get_tree("[i]x[/i]")

        assert isinstance(tree, BBTree)
        assert tree.get_node(1).tag is BBTag.ITALIC

    def test_parser_errors_are_not_cached(self) -> None:
        """Test that a failed parse stores nothing."""
        cache = BBCodeCache(BBCodeParser(BBCodeParserOptions(strict_mode=True)))

        with pytest.raises(ParsingError):
            cache.get_tree("[b]x")

        assert "[b]x" not in cache
        assert cache.misses == 0
