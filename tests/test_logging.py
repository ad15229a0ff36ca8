"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from lazyspf.algorithms.spf import spf
from lazyspf.config import SearchConfig
from lazyspf.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    level_for_flags,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def restore_level():
    yield
    set_global_log_level(logging.INFO)


def test_centralized_logging():
    logger = get_logger("lazyspf.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        set_global_log_level(logging.INFO)
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        set_global_log_level(logging.DEBUG)
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_child_loggers_inherit_level():
    logger1 = get_logger("lazyspf.module1")
    logger2 = get_logger("lazyspf.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    setup_root_logger()
    setup_root_logger(level=logging.DEBUG)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1


def test_records_go_to_stderr(capsys):
    get_logger("lazyspf.stream").warning("routed to stderr")
    captured = capsys.readouterr()
    assert "routed to stderr" in captured.err
    assert "routed to stderr" not in captured.out
    assert "WARNING" in captured.err


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_for_flags(verbose, quiet, expected):
    assert level_for_flags(verbose, quiet) == expected


def test_search_debug_logging(textbook9, caplog):
    set_global_log_level(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="lazyspf"):
        spf(textbook9, 0, config=SearchConfig(progress_interval=4))
    messages = [r.getMessage() for r in caplog.records]
    assert any("settled=4" in m for m in messages)
    assert any("settled=8" in m for m in messages)
    assert any("finished: reached=9" in m for m in messages)
