#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbview/options/bbcode.py
"""Configuration options for BBCode parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbview.constants import DEFAULT_BBCODE_STRICT_MODE, DEFAULT_MAX_NESTING_DEPTH
from bbview.options.base import BaseParserOptions


@dataclass(frozen=True)
class BBCodeParserOptions(BaseParserOptions):
    """Configuration options for BBCode-to-tree parsing.

    Parameters
    ----------
    strict_mode : bool, default False
        Whether to raise ParsingError on unmatched or unclosed tags.
        When False, the parser never fails: unmatched closing tags are kept as
        literal text and unclosed tags are closed at the end of input.
    max_nesting_depth : int, default 200
        Maximum number of simultaneously open tags. Opening tags beyond this
        depth are kept as literal text, which bounds the depth of the tree.

    Examples
    --------
        >>> from bbview.parsers.bbcode import BBCodeParser
        >>> parser = BBCodeParser(BBCodeParserOptions(strict_mode=True))

    """

    strict_mode: bool = field(
        default=DEFAULT_BBCODE_STRICT_MODE,
        metadata={"help": "Raise errors on malformed BBCode syntax"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum number of nested open tags"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_nesting_depth is not positive.

        """
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")
