"""Tests for logging setup/teardown."""

import json
import logging
import sys

from rich.logging import RichHandler

from du_simulator.utils import StructuredFormatter, setup_logging, teardown_logging


def test_pretty_console_uses_rich():
    logger = setup_logging(log_level="INFO", log_format="pretty")
    assert logger.name == "du_simulator"
    assert any(isinstance(h, RichHandler) for h in logger.handlers)


def test_setup_replaces_handlers():
    setup_logging(log_format="structured")
    logger = setup_logging(log_format="structured")
    assert len(logger.handlers) == 1


def test_file_handler_structured(tmp_path):
    log_file = tmp_path / "logs" / "sim.log"
    logger = setup_logging(log_file=log_file, log_format="structured", console_output=False)
    logging.getLogger("du_simulator.fixture").info("hello", extra={"action": "install"})
    teardown_logging(logger)

    line = json.loads(log_file.read_text().strip())
    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["action"] == "install"
    assert line["logger"] == "du_simulator.fixture"


def test_teardown_removes_handlers():
    logger = setup_logging()
    teardown_logging()
    assert logger.handlers == []


def test_structured_formatter_exception():
    formatter = StructuredFormatter()
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "oops", None, sys.exc_info())
    data = json.loads(formatter.format(record))
    assert "ValueError: bad" in data["exception"]
