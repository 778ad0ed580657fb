"""Centralized logging configuration.

Console output goes to stderr so it never mixes with report text printed on
stdout.  A log file is added only when one is configured.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "WARNING", log_file: str = "") -> None:
    """Configure the root logger for the whole application.

    Calling it again replaces the previous handlers, so the CLI can apply a
    ``--log-level`` override after the configured defaults.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger that follows the global format and handlers."""
    return logging.getLogger(name)
