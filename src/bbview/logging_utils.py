"""Logging setup for the bbview command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from bbview.constants import DEFAULT_LOG_LEVEL, LogLevel

CONSOLE_FORMAT = "bbview: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: LogLevel | str) -> int:
    """Return the numeric level for a level name such as ``"INFO"``.

    Raises
    ------
    ValueError
        If ``log_level`` is not a standard level name

    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: LogLevel | str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route log records from every bbview module to stderr and, optionally, a file.

    Parameters
    ----------
    log_level : LogLevel, default "WARNING"
        Level name. Recovered markup is logged at DEBUG, render truncation at
        WARNING.
    log_file : str, optional
        Path of a file that receives the same records (appended).
    trace_mode : bool, default False
        Prefix records with a timestamp and the emitting module.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    # stdout carries the rendered document
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    return root_logger
