"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from topograph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()
    setup_root_logger()


def test_centralized_logging():
    logger = get_logger("topograph.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    disable_debug_logging()
    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    enable_debug_logging()
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()
    logger.handlers.clear()


def test_loggers_inherit_root_level():
    logger1 = get_logger("topograph.module1")
    logger2 = get_logger("topograph.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("topograph").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_single_handler_after_repeated_setup():
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger("topograph").handlers) == 1


def test_custom_handler_and_format():
    reset_logging()
    stream = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(stream),
    )
    get_logger("topograph.custom").debug("hello")
    assert "DEBUG|hello" in stream.getvalue()


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("TOPOGRAPH_LOG_LEVEL", "error")
    reset_logging()
    setup_root_logger()
    assert logging.getLogger("topograph").level == logging.ERROR


def test_unknown_environment_level_falls_back(monkeypatch):
    monkeypatch.setenv("TOPOGRAPH_LOG_LEVEL", "chatty")
    reset_logging()
    setup_root_logger(level=logging.WARNING)
    assert logging.getLogger("topograph").level == logging.WARNING


def test_algorithm_warning_reaches_handler():
    from topograph.algorithms import kahn_sort
    from topograph.graph import Graph

    reset_logging()
    stream = StringIO()
    setup_root_logger(handler=logging.StreamHandler(stream))
    kahn_sort(Graph.from_edge_list(2, [(0, 1), (1, 0)]))
    assert "WARNING" in stream.getvalue()
    assert "cycle" in stream.getvalue()


def test_default_handler_writes_to_current_stderr(capsys):
    reset_logging()
    setup_root_logger()
    get_logger("topograph.stream").warning("routed to stderr")
    captured = capsys.readouterr()
    assert "routed to stderr" in captured.err
    assert captured.out == ""
