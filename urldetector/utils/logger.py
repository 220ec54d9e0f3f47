"""Structured logging utilities with JSONL output."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any


def get_logger(
    name: str,
    log_file: Path | None = None,
    level: str | int = logging.INFO,
) -> logging.Logger:
    """
    Get a configured logger with a console handler and optional JSONL file.

    Console output goes to stderr so that detected URLs printed on stdout
    stay machine-readable. Handlers are only attached the first time a name
    is configured: a later call with a different log_file keeps the
    existing handlers and does not add a file handler for it.

    Args:
        name: Logger name (usually __name__)
        log_file: Optional path to JSONL log file
        level: Logging level name or number

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Only configure if not already configured
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    if log_file:
        logger.addHandler(JSONLFileHandler(Path(log_file)))

    return logger


class JSONLFileHandler(logging.Handler):
    """Handler that appends log records to a file as JSON lines."""

    def __init__(self, filepath: Path):
        super().__init__()
        self.filepath = filepath
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }

            # Structured fields from log_event()
            event = getattr(record, "event", None)
            if isinstance(event, dict):
                log_entry.update(event)

            with open(self.filepath, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry, default=str) + "\n")

        except Exception:
            self.handleError(record)


def log_event(
    logger: logging.Logger,
    event_type: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event with additional metadata.

    Args:
        logger: Logger instance
        event_type: Type of event (e.g., "detect_start", "files_detected")
        message: Human-readable message
        level: Logging level
        **kwargs: Additional metadata to include in the JSONL entry
    """
    logger.log(level, message, extra={"event": {"event_type": event_type, **kwargs}})
