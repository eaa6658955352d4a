"""
Unit tests -- logger factory and request timing.
"""
import logging

import pytest

from d2client.core.logging import get_logger, timed


def test_single_handler_per_logger():
    first = get_logger("d2client.test")
    second = get_logger("d2client.test")
    assert first is second
    assert len(first.handlers) == 1


def test_timed_logs_status(caplog):
    logger = get_logger("d2client.test.timed")
    with caplog.at_level(logging.INFO, logger="d2client.test.timed"):
        with timed(logger, "GET /api/me") as info:
            info["status"] = 200
    (record,) = caplog.records
    assert record.getMessage().startswith("GET /api/me -> 200 (")


def test_timed_logs_failure(caplog):
    logger = get_logger("d2client.test.timed_fail")
    with caplog.at_level(logging.INFO, logger="d2client.test.timed_fail"):
        with pytest.raises(RuntimeError):
            with timed(logger, "GET /api/me"):
                raise RuntimeError("boom")
    assert "-> failed" in caplog.records[0].getMessage()
