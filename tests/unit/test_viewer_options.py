#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for parser and viewer option dataclasses."""

import dataclasses

import pytest

from bbview.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_MAX_RENDER_DEPTH, MAX_RENDER_DEPTH_LIMIT
from bbview.exceptions import InvalidOptionsError, ValidationError
from bbview.options import BBCodeParserOptions, ViewerOptions
from bbview.parsers.bbcode import BBCodeParser


@pytest.mark.unit
class TestViewerOptions:
    """Test ViewerOptions defaults and validation."""

    def test_defaults(self):
        options = ViewerOptions()

        assert options.max_depth == DEFAULT_MAX_RENDER_DEPTH == 256
        assert options.apply_font_color is False

    def test_upper_bound_allowed(self):
        assert ViewerOptions(max_depth=MAX_RENDER_DEPTH_LIMIT).max_depth == 300

    @pytest.mark.parametrize("depth", [0, -1, MAX_RENDER_DEPTH_LIMIT + 1])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError, match="max_depth"):
            ViewerOptions(max_depth=depth)

    def test_create_updated(self):
        """Test that create_updated returns a modified copy."""
        original = ViewerOptions()
        updated = original.create_updated(max_depth=10)

        assert updated.max_depth == 10
        assert original.max_depth == DEFAULT_MAX_RENDER_DEPTH

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            ViewerOptions().create_updated(max_depth=0)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ViewerOptions().max_depth = 5  # type: ignore[misc]

    def test_field_metadata(self):
        """Test that every option carries help text."""
        for f in dataclasses.fields(ViewerOptions):
            assert f.metadata.get("help")


@pytest.mark.unit
class TestFromMapping:
    """Test building options from configuration mappings."""

    def test_hyphenated_keys(self):
        options = ViewerOptions.from_mapping({"max-depth": 12, "apply_font_color": True})

        assert options.max_depth == 12
        assert options.apply_font_color is True

    def test_unknown_key(self):
        with pytest.raises(ValidationError) as exc_info:
            BBCodeParserOptions.from_mapping({"strictness": True})

        assert exc_info.value.parameter_name == "strictness"

    def test_empty_mapping_gives_defaults(self):
        assert BBCodeParserOptions.from_mapping({}) == BBCodeParserOptions()


@pytest.mark.unit
class TestBBCodeParserOptions:
    """Test BBCodeParserOptions defaults and validation."""

    def test_defaults(self):
        options = BBCodeParserOptions()

        assert options.strict_mode is False
        assert options.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH

    def test_invalid_nesting_depth(self):
        with pytest.raises(ValueError, match="max_nesting_depth"):
            BBCodeParserOptions(max_nesting_depth=0)

    def test_parser_rejects_viewer_options(self):
        """Test that a parser refuses options meant for the renderer."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            BBCodeParser(ViewerOptions())  # type: ignore[arg-type]

        assert exc_info.value.expected_type is BBCodeParserOptions
        assert "ViewerOptions" in str(exc_info.value)
