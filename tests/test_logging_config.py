"""Unit tests for logging setup (avalonia_scaffold.logging_config)."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from avalonia_scaffold.logging_config import (
    LOGGER_NAME,
    FieldsFormatter,
    fields,
    get_logger,
    setup_logging,
)

pytestmark = pytest.mark.unit


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFields:
    def test_fields_wraps_values(self):
        assert fields(path="/proj", depth=2) == {"fields": {"path": "/proj", "depth": 2}}

    def test_formatter_appends_sorted_json(self):
        record = _record("Root found", fields={"path": "/proj", "is_solution_root": True})
        assert FieldsFormatter("%(message)s").format(record) == (
            'Root found {"is_solution_root": true, "path": "/proj"}'
        )

    def test_formatter_without_fields(self):
        assert FieldsFormatter("%(message)s").format(_record("plain")) == "plain"


class TestSetup:
    def test_single_rich_handler_after_repeated_setup(self):
        setup_logging("INFO")
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_messages_reach_console(self):
        buffer = io.StringIO()
        logger = setup_logging("INFO", console=Console(file=buffer, width=200))
        logger.info("Template created", extra=fields(name="Card"))
        logger.debug("hidden")
        output = buffer.getvalue()
        assert 'Template created {"name": "Card"}' in output
        assert "hidden" not in output

    def test_get_logger_children(self):
        assert get_logger().name == LOGGER_NAME
        assert get_logger("scaffold").name == f"{LOGGER_NAME}.scaffold"
