"""Utility functions for URL cleaning and logging."""

from urldetector.utils.logger import get_logger, log_event
from urldetector.utils.urls import clean_detected_urls, clean_url

__all__ = [
    "clean_detected_urls",
    "clean_url",
    "get_logger",
    "log_event",
]
