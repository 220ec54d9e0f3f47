"""Exceptions raised by the URL detectors."""


class DetectorError(Exception):
    """Base class for all detector errors."""


class ConfigurationError(DetectorError):
    """A required configuration value is missing or invalid."""


class InvalidConfiguration(ConfigurationError):
    """Pagination settings cannot produce page numbers (page size <= 0)."""
