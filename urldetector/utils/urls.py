"""Cleaning of detected URLs into site-relative paths."""

import logging
from collections.abc import Sequence

from urldetector.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def clean_url(url: str | None, home_url: str) -> str | None:
    """
    Turn one detected URL into a site-relative path.

    Steps run in a fixed order: strip the home URL, collapse "//" in a
    single pass, drop the fragment, drop the query string. A single pass
    means "///" becomes "//", not "/".

    Args:
        url: Absolute or relative URL
        home_url: Fully qualified home URL of the site

    Returns:
        Relative URL, or None if nothing is left of it

    Examples:
        >>> clean_url("http://example.com/foo/?x=1#y", "http://example.com")
        '/foo/'
    """
    if not url or not isinstance(url, str):
        return None

    url = url.replace(home_url, "/")
    url = url.replace("//", "/")

    url = url.split("#", 1)[0]
    if not url:
        return None

    url = url.split("?", 1)[0]
    if not url:
        return None

    return url


def clean_detected_urls(
    urls: Sequence[str | None],
    home_url: str | None,
) -> list[str | None]:
    """
    Clean all detected URLs before use.

    Accepts relative and absolute URLs, with or without leading or trailing
    slashes. Output is aligned with the input: URLs that clean down to
    nothing become None rather than being removed.

    Args:
        urls: Absolute or relative URLs
        home_url: Fully qualified home URL of the site

    Returns:
        Relative URLs (or None) in input order

    Raises:
        ConfigurationError: If home_url is not set
    """
    if not home_url or not isinstance(home_url, str):
        err = "Home URL not defined"
        logger.error(err)
        raise ConfigurationError(err)

    return [clean_url(url, home_url) for url in urls]
