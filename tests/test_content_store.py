"""Tests for the static content store."""

from urldetector.config.settings import SiteConfig
from urldetector.core.content_store import ContentTypeDescriptor, StaticContentStore


def test_published_types_skip_empty(content_store):
    """Test that types without published items are not listed."""
    assert content_store.published_types() == ["post", "page", "product", "orphan"]


def test_published_count(content_store):
    """Test published counts, unknown types count zero."""
    assert content_store.published_count("product") == 11
    assert content_store.published_count("unknown") == 0


def test_describe(content_store):
    """Test descriptors for known and unknown types."""
    assert content_store.describe("post") == ContentTypeDescriptor(name="post", plural_label="Posts")
    assert content_store.describe("orphan") is None


def test_from_site_config():
    """Test building a store from the site file's content types."""
    config = SiteConfig.model_validate(
        {
            "home_url": "http://example.com",
            "content_types": [
                {"name": "post", "published": 3, "label": "Posts"},
                {"name": "draft_only"},
                {"name": "legacy", "published": 2},
            ],
        }
    )

    store = StaticContentStore.from_site_config(config)

    assert store.published_types() == ["post", "legacy"]
    assert store.describe("post").plural_label == "Posts"
    assert store.describe("legacy") is None
