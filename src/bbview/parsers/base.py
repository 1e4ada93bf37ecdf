#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbview/parsers/base.py
"""Base class for markup parsers.

Parsers turn a source string into a :class:`~bbview.ast.BBTree`. They are
plain callables as far as the parse cache is concerned: anything accepting a
string and returning a tree can stand in for a parser.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bbview.ast import BBTree
from bbview.exceptions import InvalidOptionsError
from bbview.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: str) -> BBTree:
        """Parse markup text into a tree.

        Parameters
        ----------
        text : str
            Markup source

        Returns
        -------
        BBTree
            The parsed tree

        """

    def __call__(self, text: str) -> BBTree:
        return self.parse(text)
