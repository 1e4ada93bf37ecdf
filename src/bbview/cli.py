#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for bbview.

Renders BBCode from a file or standard input to the terminal.

Examples
--------
Render a file::

    $ bbview post.bbcode

Render from stdin on a light terminal::

    $ echo "[b]hello[/b] [i]world[/i]" | bbview --light

Inspect the draw calls instead of drawing::

    $ bbview post.bbcode --dump-ops

"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import fields
from typing import Optional, Sequence, get_args

from rich.console import Console

from bbview import __version__
from bbview.cache import BBCodeCache
from bbview.config import BBViewConfig, load_config_with_priority
from bbview.constants import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL, LogLevel
from bbview.exceptions import BBViewError, ConfigError, ParsingError, ValidationError
from bbview.logging_utils import configure_logging
from bbview.options import BBCodeParserOptions, ViewerOptions
from bbview.parsers.bbcode import BBCodeParser
from bbview.sinks.base import UISink
from bbview.sinks.recording import RecordingSink
from bbview.sinks.rich import RichSink
from bbview.viewer import BBCodeViewer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6


def option_help(options_class: type, name: str) -> str:
    """Return the help text stored in an option field's metadata."""
    for f in fields(options_class):
        if f.name == name:
            return f.metadata.get("help", "")
    raise KeyError(f"{options_class.__name__} has no option {name!r}")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bbview",
        description="Render BBCode markup to the terminal.",
    )
    parser.add_argument("input", nargs="?", default="-", help="BBCode file to render, or '-' for stdin (default)")
    parser.add_argument("--config", help=f"Configuration file (default: ${CONFIG_ENV_VAR} or auto-discovered)")
    parser.add_argument("--max-depth", type=int, help=option_help(ViewerOptions, "max_depth"))
    parser.add_argument(
        "--apply-font-color",
        action="store_true",
        default=None,
        help=option_help(ViewerOptions, "apply_font_color"),
    )
    parser.add_argument(
        "--strict", action="store_true", default=None, help=option_help(BBCodeParserOptions, "strict_mode")
    )
    parser.add_argument("--light", action="store_true", help="Use colours for a light terminal background")
    parser.add_argument("--no-color", action="store_true", help="Disable colours")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--dump-ops", action="store_true", help="Print the draw operations as JSON")
    output.add_argument("--dump-tree", action="store_true", help="Print the parsed tree as JSON")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=list(get_args(LogLevel)),
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_arguments(config: BBViewConfig, args: argparse.Namespace) -> BBViewConfig:
    """Override configuration values with explicit command-line arguments."""
    parser_updates = {}
    viewer_updates = {}
    if args.strict is not None:
        parser_updates["strict_mode"] = args.strict
    if args.max_depth is not None:
        viewer_updates["max_depth"] = args.max_depth
    if args.apply_font_color is not None:
        viewer_updates["apply_font_color"] = args.apply_font_color

    try:
        return BBViewConfig(
            parser=config.parser.create_updated(**parser_updates),
            viewer=config.viewer.create_updated(**viewer_updates),
            source=config.source,
        )
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def read_input(path: str) -> str:
    """Read markup from ``path`` or stdin for ``-``."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    args = create_parser().parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        config = apply_arguments(load_config_with_priority(args.config, os.environ.get(CONFIG_ENV_VAR)), args)
        source = read_input(args.input)

        cache = BBCodeCache(BBCodeParser(config.parser))
        if args.dump_tree:
            print(json.dumps(cache.get_tree(source).to_dict(), indent=2, ensure_ascii=False))
            return EXIT_SUCCESS

        dark_mode = not args.light
        sink: UISink
        if args.dump_ops:
            sink = RecordingSink(dark_mode=dark_mode)
        else:
            console = Console(no_color=args.no_color, highlight=False)
            sink = RichSink(console, dark_mode=dark_mode, color=not args.no_color)

        BBCodeViewer(config.viewer).show(sink, cache, source)

        if isinstance(sink, RecordingSink):
            print(json.dumps(sink.to_dicts(), indent=2, ensure_ascii=False))
        elif isinstance(sink, RichSink):
            sink.flush()
        return EXIT_SUCCESS

    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return EXIT_FILE_ERROR
    except (ConfigError, ValidationError) as e:
        logger.error(e.message)
        return EXIT_VALIDATION_ERROR
    except ParsingError as e:
        logger.error("Parsing failed: %s", e.message)
        return EXIT_PARSING_ERROR
    except BBViewError as e:
        logger.error(e.message)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
