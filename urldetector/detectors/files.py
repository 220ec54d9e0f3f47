"""Map files under a site's public directory to URLs."""

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def file_path_looks_crawlable(
    filename: str,
    ignored_name_fragments: Sequence[str] = (),
    ignored_extensions: Sequence[str] = (),
) -> bool:
    """
    Check a file path against the filename and extension ignore lists.

    Args:
        filename: File path or name to check
        ignored_name_fragments: Case-insensitive substrings that exclude a file
        ignored_extensions: Extensions (without the dot) that exclude a file

    Returns:
        True if the file is neither ignored by name nor by extension

    Examples:
        >>> file_path_looks_crawlable("style.min.css", [], ["css"])
        False
        >>> file_path_looks_crawlable("backup-old.sql", ["backup"], [])
        False
    """
    lowered = filename.lower()

    for fragment in ignored_name_fragments:
        if fragment and fragment.lower() in lowered:
            return False

    for extension in ignored_extensions:
        extension = extension.lower().lstrip(".")
        if extension and lowered.endswith(f".{extension}"):
            return False

    return True


def list_local_file_urls(
    root_dir: str | Path,
    site_path: str | Path | None,
    ignored_name_fragments: Sequence[str] = (),
    ignored_extensions: Sequence[str] = (),
) -> list[str]:
    """
    Get site-relative URLs for every crawlable file under a directory.

    The URL of a file is its path with the site root replaced by "/". Dotfiles
    are included unless an ignore rule matches them. Results are in
    traversal order and are not normalized.

    Args:
        root_dir: Directory to walk
        site_path: Filesystem root of the site
        ignored_name_fragments: See file_path_looks_crawlable()
        ignored_extensions: See file_path_looks_crawlable()

    Returns:
        List of candidate URLs, empty if root_dir is not a directory
    """
    root = Path(root_dir).absolute()

    if not root.is_dir():
        logger.debug(f"{root} is not a directory, no file URLs")
        return []

    site_root = _site_root(site_path)
    urls = []

    for path in root.rglob("*"):
        if not path.is_file():
            continue

        filename = path.as_posix()

        if not file_path_looks_crawlable(filename, ignored_name_fragments, ignored_extensions):
            continue

        if site_root is None:
            continue

        url = filename
        if filename.startswith(site_root):
            url = "/" + filename[len(site_root):]

        if not url:
            continue

        urls.append(url)

    logger.debug(f"Found {len(urls)} file URLs under {root}")

    return urls


def _site_root(site_path: str | Path | None) -> str | None:
    """Absolute site path as a POSIX string ending in '/', None if unset."""
    if not site_path:
        return None

    site_root = Path(site_path).absolute().as_posix()

    if not site_root.endswith("/"):
        site_root += "/"

    return site_root
