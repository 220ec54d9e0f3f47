"""URL detection orchestrator for a single site."""

from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from urldetector.config.settings import SiteConfig
from urldetector.core.content_store import ContentStore
from urldetector.core.models import PaginationSettings
from urldetector.detectors.files import list_local_file_urls
from urldetector.detectors.pagination import (
    archive_slug_resolver,
    collect_content_types,
    detect_pagination_urls,
)
from urldetector.exceptions import ConfigurationError, InvalidConfiguration
from urldetector.utils.logger import get_logger, log_event
from urldetector.utils.urls import clean_detected_urls


class DetectionResult(BaseModel):
    """Raw and cleaned URLs from one detection run."""

    pagination_urls: list[str] = Field(default_factory=list)
    pagination_cleaned: list[str | None] = Field(default_factory=list)
    file_urls: list[str] = Field(default_factory=list)
    file_cleaned: list[str | None] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict)

    def all_urls(self) -> list[str]:
        """Cleaned URLs from both detectors, in order, without duplicates removed."""
        return [
            url
            for url in [*self.pagination_cleaned, *self.file_cleaned]
            if url is not None
        ]


class URLDetector:
    """
    Detects every URL a site exposes.

    Workflow:
    1. Validate the home URL and pagination settings
    2. Build pagination URLs for each published content type
    3. Map static files under the scan directories to URLs
    4. Clean both URL lists into site-relative paths
    """

    def __init__(
        self,
        site_config: SiteConfig,
        content_store: ContentStore,
        log_file: Path | None = None,
    ):
        """
        Initialize detector.

        Args:
            site_config: Site description
            content_store: Source of published content types and counts
            log_file: Optional JSONL log file
        """
        self.site_config = site_config
        self.content_store = content_store
        self.logger = get_logger("urldetector", log_file)

        self.pagination = PaginationSettings(
            base_segment=site_config.pagination_base,
            default_page_size=site_config.posts_per_page,
        )

        self.stats: dict[str, Any] = {
            "content_types": 0,
            "pagination_urls": 0,
            "file_urls": 0,
            "discarded_urls": 0,
            "start_time": None,
            "end_time": None,
        }

    def detect(self) -> DetectionResult:
        """
        Run both detectors and clean their output.

        Returns:
            DetectionResult with raw and cleaned URL lists

        Raises:
            ConfigurationError: If the home URL is missing
            InvalidConfiguration: If the page size is not positive
        """
        self._validate()

        self.stats["start_time"] = datetime.now().isoformat()
        log_event(
            self.logger,
            "detect_start",
            f"Detecting URLs for {self.site_config.home_url}",
            home_url=self.site_config.home_url,
        )

        pagination_urls = self._detect_pagination()
        file_urls = self._detect_files()

        home_url = self.site_config.home_url
        pagination_cleaned = clean_detected_urls(pagination_urls, home_url)
        file_cleaned = clean_detected_urls(file_urls, home_url)

        self.stats["pagination_urls"] = len(pagination_urls)
        self.stats["file_urls"] = len(file_urls)
        self.stats["discarded_urls"] = sum(
            1 for url in [*pagination_cleaned, *file_cleaned] if url is None
        )
        self.stats["end_time"] = datetime.now().isoformat()

        log_event(
            self.logger,
            "detect_complete",
            f"Detection complete. Stats: {self.stats}",
            **self.stats,
        )

        return DetectionResult(
            pagination_urls=pagination_urls,
            pagination_cleaned=pagination_cleaned,
            file_urls=file_urls,
            file_cleaned=file_cleaned,
            stats=dict(self.stats),
        )

    def _validate(self) -> None:
        """Fail before doing any work if the configuration is unusable."""
        if not self.site_config.home_url:
            raise ConfigurationError("Home URL not defined")

        if self.pagination.default_page_size <= 0:
            raise InvalidConfiguration(
                f"Page size must be positive, got {self.pagination.default_page_size}"
            )

    def _detect_pagination(self) -> list[str]:
        """Build pagination URLs from the content store."""
        content_types = collect_content_types(
            self.content_store,
            primary_type=self.site_config.primary_content_type,
            page_type=self.site_config.page_content_type,
        )
        self.stats["content_types"] = len(content_types)

        urls = detect_pagination_urls(
            self.site_config.site_url,
            content_types,
            self.pagination,
            archive_slug_resolver(self.site_config.posts_page_link),
        )

        log_event(
            self.logger,
            "pagination_detected",
            f"Detected {len(urls)} pagination URLs from {len(content_types)} content types",
            count=len(urls),
        )

        return urls

    def _detect_files(self) -> list[str]:
        """Map files in every scan directory to URLs."""
        urls: list[str] = []

        for scan_dir in self.site_config.get_scan_dirs():
            dir_urls = list_local_file_urls(
                scan_dir,
                self.site_config.site_path,
                self.site_config.filenames_to_ignore,
                self.site_config.extensions_to_ignore,
            )
            urls.extend(dir_urls)

            log_event(
                self.logger,
                "files_detected",
                f"Found {len(dir_urls)} file URLs in {scan_dir}",
                directory=str(scan_dir),
                count=len(dir_urls),
            )

        return urls
