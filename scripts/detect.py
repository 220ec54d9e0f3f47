"""Detect and print every URL of a site."""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from urldetector.config.settings import get_settings, load_site_config
from urldetector.core.content_store import StaticContentStore
from urldetector.core.detector import URLDetector
from urldetector.exceptions import ConfigurationError


def main() -> int:
    """Run the detector and print cleaned URLs, one per line."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Detect the URLs a site exposes")
    parser.add_argument(
        "--config",
        type=Path,
        default=settings.site_config_path,
        help=f"Site YAML file (default: {settings.site_config_path})",
    )
    parser.add_argument(
        "--source",
        choices=["all", "pagination", "files"],
        default="all",
        help="Which detector output to print (default: all)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=settings.log_file,
        help="Append structured logs to this JSONL file",
    )

    args = parser.parse_args()

    try:
        site_config = load_site_config(args.config)
        detector = URLDetector(
            site_config,
            StaticContentStore.from_site_config(site_config),
            log_file=args.log_file,
        )
        detector.logger.setLevel(settings.log_level.upper())
        result = detector.detect()
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.source == "pagination":
        urls = [url for url in result.pagination_cleaned if url is not None]
    elif args.source == "files":
        urls = [url for url in result.file_cleaned if url is not None]
    else:
        urls = result.all_urls()

    for url in urls:
        print(url)

    return 0


if __name__ == "__main__":
    sys.exit(main())
