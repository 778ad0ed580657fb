"""Composition root: wires settings, logging and session state together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from ims.application.context import AppContext
from ims.infrastructure.config import settings
from ims.infrastructure.logging_config import setup_logging


def configure_logging(level: str | None = None) -> None:
    setup_logging(level or settings.log_level, settings.log_file)


def app_context() -> AppContext:
    """A fresh session: empty inventory, empty current order."""
    return AppContext(
        currency=settings.currency,
        date_format=settings.report_date_format,
    )
