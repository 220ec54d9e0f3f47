"""Pagination URL detection for content type archives."""

import logging
from collections.abc import Callable

from urldetector.core.content_store import ContentStore
from urldetector.core.models import ContentTypeInfo, PaginationSettings
from urldetector.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

ArchiveSlugResolver = Callable[[], str | None]


def collect_content_types(
    store: ContentStore,
    primary_type: str = "post",
    page_type: str = "page",
) -> list[ContentTypeInfo]:
    """
    Gather published content types from a content store.

    Types the store cannot describe are skipped.

    Args:
        store: Content store to query
        primary_type: Identifier of the site's main listing type
        page_type: Identifier of the built-in hierarchical page type

    Returns:
        ContentTypeInfo list in the store's enumeration order
    """
    content_types = []

    for identifier in store.published_types():
        descriptor = store.describe(identifier)

        if descriptor is None:
            logger.debug(f"No descriptor for content type {identifier}, skipping")
            continue

        content_types.append(
            ContentTypeInfo(
                identifier=identifier,
                published_count=store.published_count(identifier),
                plural_label=descriptor.plural_label,
                is_primary=identifier == primary_type,
                is_page=identifier == page_type,
            )
        )

    return content_types


def archive_slug_resolver(archive_link: str | None) -> ArchiveSlugResolver:
    """
    Build a resolver for the primary type's archive slug.

    Args:
        archive_link: URL of the page the primary type's archive is shown on,
                      None or empty when the archive is the home page

    Returns:
        Callable returning the link, or None when no archive page is set
    """

    def resolve() -> str | None:
        return archive_link or None

    return resolve


def detect_pagination_urls(
    site_url: str,
    content_types: list[ContentTypeInfo],
    settings: PaginationSettings,
    resolve_archive_slug: ArchiveSlugResolver | None = None,
) -> list[str]:
    """
    Build paginated archive URLs for each published content type.

    For every type, one URL per archive page is emitted, in content type
    order and then ascending page number:

        /{plural_label}/{base_segment}/{page}/

    The primary type lives at the site root, or under its archive slug when
    `resolve_archive_slug` yields one:

        /{archive_slug}{base_segment}/{page}/

    Types with no published items, the hierarchical page type and types whose
    label contains whitespace are skipped.

    Args:
        site_url: Fully qualified site URL, stripped from the archive slug
        content_types: Content types to paginate
        settings: Pagination base segment and page size
        resolve_archive_slug: Returns the primary type's archive link or slug

    Returns:
        List of site-relative pagination URLs

    Raises:
        InvalidConfiguration: If the page size is not positive
    """
    page_size = settings.default_page_size
    if page_size <= 0:
        raise InvalidConfiguration(f"Page size must be positive, got {page_size}")

    urls: list[str] = []

    for content_type in content_types:
        if content_type.published_count == 0:
            continue

        # paginated elsewhere
        if content_type.is_page:
            continue

        label = content_type.plural_label

        # labels are used as a single path segment
        if any(char.isspace() for char in label):
            logger.debug(f"Skipping {content_type.identifier}: label '{label}' has spaces")
            continue

        total_pages = -(-content_type.published_count // page_size)

        if content_type.is_primary:
            prefix = _archive_prefix(site_url, resolve_archive_slug)
        else:
            prefix = f"{label}/"

        for page in range(1, total_pages + 1):
            urls.append(f"/{prefix}{settings.base_segment}/{page}/")

    logger.debug(f"Detected {len(urls)} pagination URLs")

    return urls


def _archive_prefix(site_url: str, resolve: ArchiveSlugResolver | None) -> str:
    """Path prefix for the primary type's archive ('' or 'slug/')."""
    if resolve is None:
        return ""

    slug = resolve()
    if not slug:
        return ""

    if not slug.endswith("/"):
        slug += "/"

    if site_url:
        slug = slug.replace(site_url, "")

    return slug.lstrip("/")
