"""Loguru sink configuration for applications embedding json-equivalence.

The package logger is disabled at import (see ``json_equivalence.__init__``)
so library users see nothing unless they opt in.  ``configure_logging``
is the opt-in used by the command line.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

__all__ = ["LOG_FORMATS", "LOG_LEVELS", "configure_logging"]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR")
LOG_FORMATS = ("text", "json")

_TEXT_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"


def configure_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    log_format: str = "text",
    enabled: bool = True,
) -> None:
    """Replace all loguru sinks with a stderr sink and an optional file sink.

    Args:
        level:      Minimum level name (one of ``LOG_LEVELS``).
        log_file:   Path of a file sink; None for stderr only.
        log_format: ``"text"`` for plain lines, ``"json"`` for one JSON
                    record per line.
        enabled:    False removes every sink and disables the package logger.

    Raises:
        ValueError: If level or log_format is not recognised.
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {LOG_LEVELS}")
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"unknown log format {log_format!r}, expected one of {LOG_FORMATS}"
        )

    logger.remove()
    if not enabled:
        logger.disable("json_equivalence")
        return

    logger.enable("json_equivalence")
    serialize = log_format == "json"
    logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, serialize=serialize)
    if log_file is not None:
        logger.add(
            str(log_file),
            level=level,
            format=_TEXT_FORMAT,
            serialize=serialize,
            encoding="utf-8",
        )
