"""Test suite for LogCollector class."""

import logging
import pytest
from tokenledger import LogCollector, MemoryLedger


@pytest.mark.parametrize(
    "log_level, messages, expected_logs",
    [
        (
            logging.INFO,
            [(logging.DEBUG, "This should NOT be collected"),
             (logging.INFO, "This should be collected"),
             (logging.WARNING, "Warning message")],
            ["This should be collected", "Warning message"],
        ),
        (
            logging.ERROR,
            [(logging.DEBUG, "Debug message"),
             (logging.INFO, "Info message"),
             (logging.WARNING, "Warning message")],
            [],
        ),
    ],
)
def test_log_collector_respects_logging_levels(log_level, messages, expected_logs):
    logger = logging.getLogger("test_logger")
    logger.setLevel(logging.DEBUG)
    collector = LogCollector(logger.name, log_level)

    for level, msg in messages:
        logger.log(level, msg)

    assert collector.logs == expected_logs
    collector.close()


def test_log_collector_close_and_clear():
    logger = logging.getLogger("test_logger_close")
    logger.setLevel(logging.DEBUG)
    collector = LogCollector(logger.name, logging.INFO)
    logger.info("first")
    collector.close()
    logger.info("second")
    assert collector.logs == ["first"]
    collector.clear()
    assert collector.logs == []


def test_log_collector_with_console_output(caplog):
    logger = logging.getLogger("test_logger_console")
    logger.setLevel(logging.DEBUG)
    collector = LogCollector(channel=logger.name, level=logging.INFO, keep_console_output=True)
    with caplog.at_level(logging.INFO):
        logger.info("Collected and printed")

    assert collector.logs == ["Collected and printed"]
    assert "Collected and printed" in caplog.text
    collector.close()


def test_log_collector_adds_console_handler_if_no_handlers(monkeypatch):
    logger = logging.getLogger("test_logger_no_handlers")
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    # Keep console output out of the test report
    monkeypatch.setattr(logging.StreamHandler, "emit", lambda self, record: None)

    collector = LogCollector(channel=logger.name, level=logging.DEBUG, keep_console_output=True)
    assert any(type(handler) is logging.StreamHandler for handler in logger.handlers), (
        "LogCollector should have added a StreamHandler"
    )
    logger.debug("This should be collected")
    assert collector.logs == ["This should be collected"]
    collector.close()


def test_log_collector_on_ledger_channel():
    engine = MemoryLedger()
    engine.mint("alice", 1)
    collector = LogCollector()
    try:
        engine.initialize(reset=True)
    finally:
        collector.close()
    assert collector.logs == ["Discarding existing ledger in MemoryStore()."]
