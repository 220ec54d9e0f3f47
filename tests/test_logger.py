"""Tests for logging utilities."""

import json
import logging
from pathlib import Path

from urldetector.utils.logger import JSONLFileHandler, get_logger, log_event


def test_get_logger_configures_once(tmp_path: Path):
    """Test that repeated calls do not stack handlers."""
    logger = get_logger("urldetector.tests.once", tmp_path / "a.jsonl")
    handler_count = len(logger.handlers)

    again = get_logger("urldetector.tests.once", tmp_path / "a.jsonl")

    assert again is logger
    assert len(again.handlers) == handler_count == 2


def test_log_event_writes_jsonl(tmp_path: Path):
    """Test that structured events are written as JSON lines."""
    log_file = tmp_path / "nested" / "events.jsonl"
    logger = logging.getLogger("urldetector.tests.events")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    handler = JSONLFileHandler(log_file)
    logger.addHandler(handler)

    try:
        log_event(logger, "files_detected", "Found 2 file URLs", count=2, directory="/srv")
        logger.info("plain message")
    finally:
        logger.removeHandler(handler)
        handler.close()

    lines = log_file.read_text().splitlines()
    first, second = (json.loads(line) for line in lines)

    assert first["event_type"] == "files_detected"
    assert first["count"] == 2
    assert first["directory"] == "/srv"
    assert first["message"] == "Found 2 file URLs"
    assert first["level"] == "INFO"
    assert "event_type" not in second
    assert second["message"] == "plain message"
