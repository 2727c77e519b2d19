"""Logging configuration for the scaffolder.

Output goes through a Rich handler on stderr so it does not interleave with
the console summary. Components never reach for a global logger: they
receive one in their constructor, and attach structured context through
``fields``::

    logger.debug("Root found", extra=fields(path=str(root)))
"""

from __future__ import annotations

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "avalonia_scaffold"


class FieldsFormatter(logging.Formatter):
    """Formatter that appends a record's structured fields as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        record_fields = getattr(record, "fields", None)
        if record_fields:
            message = f"{message} {json.dumps(record_fields, default=str, sort_keys=True)}"
        return message


def fields(**values: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping carrying structured fields for a record."""
    return {"fields": values}


def setup_logging(level: str = "INFO", console: Console | None = None) -> logging.Logger:
    """Configure and return the scaffolder logger.

    Args:
        level: Logging level name (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``).
        console: Rich console to write to. Defaults to a stderr console.

    Returns:
        The configured ``avalonia_scaffold`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False

    # Re-running setup replaces the handler instead of stacking them.
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(FieldsFormatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the scaffolder logger or one of its children."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
