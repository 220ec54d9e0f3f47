"""URL detectors."""

from urldetector.detectors.files import file_path_looks_crawlable, list_local_file_urls
from urldetector.detectors.pagination import (
    archive_slug_resolver,
    collect_content_types,
    detect_pagination_urls,
)

__all__ = [
    "archive_slug_resolver",
    "collect_content_types",
    "detect_pagination_urls",
    "file_path_looks_crawlable",
    "list_local_file_urls",
]
