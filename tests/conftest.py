"""Pytest configuration and shared fixtures for the bbview test suite."""

import pytest
from utils import CountingParser

from bbview.cache import BBCodeCache
from bbview.parsers.bbcode import BBCodeParser
from bbview.renderers.cascade import CascadeRenderer
from bbview.sinks.recording import RecordingSink
from bbview.style import TextStyle


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def parser() -> BBCodeParser:
    """Provide a parser with default options."""
    return BBCodeParser()


@pytest.fixture
def sink() -> RecordingSink:
    """Provide an empty recording sink with a dark background."""
    return RecordingSink(dark_mode=True)


@pytest.fixture
def renderer() -> CascadeRenderer:
    """Provide a renderer with default options."""
    return CascadeRenderer()


@pytest.fixture
def counting_parser() -> CountingParser:
    """Provide a call-counting parser."""
    return CountingParser()


@pytest.fixture
def cache(counting_parser) -> BBCodeCache:
    """Provide a parse cache backed by the counting parser."""
    return BBCodeCache(counting_parser)


@pytest.fixture
def dark_style() -> TextStyle:
    """Provide the root style for a dark background."""
    return TextStyle.default(dark_mode=True)
