#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for BBCodeViewer with the parse cache and sinks."""

import pytest
from rich.console import Console

from bbview import BBCodeCache, BBCodeParser, BBCodeParserOptions, BBCodeViewer, ViewerOptions
from bbview.constants import TRUNCATION_MARKER
from bbview.exceptions import ParsingError
from bbview.renderers.cascade import CascadeRenderer
from bbview.sinks.recording import OpKind, RecordingSink
from bbview.sinks.rich import RichSink
from bbview.style import Color32, TextStyle

FORUM_POST = """[size=2]Release notes[/size]
Thanks to [b]everyone[/b] who tested the [i]beta[/i]!

[list=1]Changes
[*]Faster [u]startup[/u]
[*]New [url=https://example.com/docs]docs[/url]
[/list]

[quote]Works great here[/quote]
[code]pip install thing[/code]
"""


@pytest.mark.integration
class TestViewerShow:
    """Test drawing through the viewer entry point."""

    def test_same_source_parsed_once(self, cache, counting_parser):
        viewer = BBCodeViewer()
        first, second = RecordingSink(), RecordingSink()

        viewer.show(first, cache, FORUM_POST)
        viewer.show(second, cache, FORUM_POST)

        assert counting_parser.calls == [FORUM_POST]
        assert first.ops == second.ops
        assert cache.hits == 1

    def test_distinct_sources_each_parsed(self, cache, counting_parser):
        viewer = BBCodeViewer()

        for source in ("[b]a[/b]", "[b]a[/b] ", "[B]a[/B]"):
            viewer.show(RecordingSink(), cache, source)

        assert len(counting_parser.calls) == 3

    def test_forum_post(self, cache):
        sink = RecordingSink()

        BBCodeViewer().show(sink, cache, FORUM_POST)

        runs = dict(sink.runs())
        assert runs["Release notes"].font_id.size == 24.0
        assert runs["everyone"].color == Color32.WHITE
        assert runs["beta"].italics
        assert runs["startup"].underline.is_visible
        assert runs["pip install thing"].code
        assert "Works great here" in sink.labels()
        (link,) = sink.ops_of(OpKind.HYPERLINK)
        assert (link.text, link.target) == ("docs", "https://example.com/docs")
        (group,) = sink.ops_of(OpKind.BEGIN_COLLAPSING)
        assert group.text.strip() == "Changes"
        assert [label for label in sink.labels() if label.endswith(".) ")] == ["0.) ", "1.) "]

    def test_light_sink_changes_colors(self, cache):
        sink = RecordingSink(dark_mode=False)

        BBCodeViewer().show(sink, cache, "plain [b]bold[/b] [i]it[/i]")

        runs = dict(sink.runs())
        assert runs["bold"].color == Color32.BLACK
        assert runs["it"].color == Color32.DARK_GRAY

    def test_root_style_comes_from_sink(self, cache):
        sink = RecordingSink(dark_mode=False)

        BBCodeViewer().show(sink, cache, "[i]x[/i]")

        assert sink.runs() == [("x", TextStyle.default(dark_mode=False).replace(italics=True))]

    def test_viewer_options(self, cache):
        sink = RecordingSink()

        BBCodeViewer(ViewerOptions(max_depth=1, apply_font_color=True)).show(
            sink, cache, "[color=red]a[b]b[/b][/color]"
        )

        assert sink.runs()[0][1].color == Color32(255, 0, 0)
        assert sink.labels()[-1] == TRUNCATION_MARKER

    def test_custom_renderer(self, cache):
        renderer = CascadeRenderer(ViewerOptions(max_depth=300))
        viewer = BBCodeViewer(renderer=renderer)

        assert viewer.renderer is renderer

    def test_parser_errors_propagate_uncached(self):
        cache = BBCodeCache(BBCodeParser(BBCodeParserOptions(strict_mode=True)))

        with pytest.raises(ParsingError):
            BBCodeViewer().show(RecordingSink(), cache, "[b]never closed")

        assert len(cache) == 0

    def test_deeply_nested_input(self, cache):
        sink = RecordingSink()

        BBCodeViewer().show(sink, cache, "[b]" * 5000 + "deep" + "[/b]" * 5000)

        assert TRUNCATION_MARKER not in sink.labels()
        assert "deep" in "".join(sink.texts())


@pytest.mark.integration
class TestRichOutput:
    """Test terminal output of complete documents."""

    def test_forum_post_lines(self, cache):
        console = Console(record=True, width=100, color_system=None)
        sink = RichSink(console)

        BBCodeViewer().show(sink, cache, FORUM_POST)
        lines = [line.plain.rstrip() for line in sink.lines()]
        sink.flush()

        assert "everyone" in lines
        assert "▼ Changes" in lines
        assert "  1.) New docs" in lines
        assert "pip install thing" in console.export_text()
