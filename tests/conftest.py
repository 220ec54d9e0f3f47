"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from urldetector.config.settings import SiteConfig
from urldetector.core.content_store import StaticContentStore
from urldetector.core.models import ContentTypeInfo, PaginationSettings


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a small public site tree on disk."""
    root = tmp_path / "public"
    files = [
        "index.html",
        "assets/a.png",
        "assets/style.min.css",
        "assets/Backup-old.SQL",
        ".git/config",
        "wp-content/uploads/2024/01/photo.JPG",
    ]
    for name in files:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x")

    # Empty directories produce no URLs
    (root / "empty").mkdir()

    return root


@pytest.fixture
def pagination_settings() -> PaginationSettings:
    """Default pagination settings: /page/N/ with 10 items per page."""
    return PaginationSettings(base_segment="page", default_page_size=10)


@pytest.fixture
def sample_content_types() -> list[ContentTypeInfo]:
    """Content types as a typical blog would publish them."""
    return [
        ContentTypeInfo(identifier="post", published_count=25, plural_label="Posts", is_primary=True),
        ContentTypeInfo(identifier="page", published_count=40, plural_label="Pages", is_page=True),
        ContentTypeInfo(identifier="product", published_count=10, plural_label="Products"),
    ]


@pytest.fixture
def content_store() -> StaticContentStore:
    """In-memory content store."""
    return StaticContentStore(
        counts={"post": 25, "page": 3, "product": 11, "attachment": 0, "orphan": 4},
        labels={"post": "Posts", "page": "Pages", "product": "Products", "attachment": "Media"},
    )


@pytest.fixture
def site_config(site_dir: Path) -> SiteConfig:
    """Site config pointing at the on-disk site tree."""
    return SiteConfig(
        home_url="http://example.com",
        site_url="http://example.com",
        site_path=str(site_dir),
        pagination_base="page",
        posts_per_page=10,
    )
