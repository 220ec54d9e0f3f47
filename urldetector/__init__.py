"""Detect the URLs a content site exposes: archive pagination, static files."""

__version__ = "0.1.0"
