"""Test utilities for the bbview test suite."""

from bbview.ast import BBTree
from bbview.options import ViewerOptions
from bbview.parsers.bbcode import BBCodeParser
from bbview.renderers.cascade import CascadeRenderer
from bbview.sinks.recording import OpKind, RecordingSink


class CountingParser:
    """Parser stand-in that counts how often it is invoked."""

    def __init__(self):
        self.calls: list[str] = []
        self._parser = BBCodeParser()

    def __call__(self, text: str) -> BBTree:
        self.calls.append(text)
        return self._parser.parse(text)


def render_source(source: str, dark_mode: bool = True, **options) -> RecordingSink:
    """Parse and render ``source`` onto a fresh RecordingSink."""
    sink = RecordingSink(dark_mode=dark_mode)
    tree = BBCodeParser().parse(source)
    CascadeRenderer(ViewerOptions(**options)).render(sink, tree)
    return sink


def text_ops(sink: RecordingSink) -> list[tuple[str, str]]:
    """Return ``(kind, text)`` for every text-bearing op, skipping empty plain labels."""
    return [
        (op.kind.value, op.text)
        for op in sink.ops_of(OpKind.LABEL, OpKind.STYLED_LABEL, OpKind.HYPERLINK)
        if op.kind is not OpKind.LABEL or op.text
    ]
