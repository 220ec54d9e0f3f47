"""Content store access for published content types."""

from dataclasses import dataclass
from typing import Protocol

from urldetector.config.settings import SiteConfig


@dataclass(frozen=True)
class ContentTypeDescriptor:
    """Display metadata for a content type."""

    name: str
    plural_label: str


class ContentStore(Protocol):
    """
    Read-only view over the site's published content.

    Implementations answer which content types have published items, how
    many each has, and how each type is labelled.
    """

    def published_types(self) -> list[str]:
        """Distinct content type identifiers with published items."""
        ...

    def published_count(self, content_type: str) -> int:
        """Number of published items for a content type."""
        ...

    def describe(self, content_type: str) -> ContentTypeDescriptor | None:
        """Descriptor for a content type, None if the type is unknown."""
        ...


class StaticContentStore:
    """
    Content store backed by a fixed list of records.

    Used by the CLI (records come from the site YAML file) and by tests.
    Enumeration order is the order records were given in.
    """

    def __init__(
        self,
        counts: dict[str, int],
        labels: dict[str, str] | None = None,
    ):
        """
        Initialize store.

        Args:
            counts: Published item count per content type identifier
            labels: Plural label per identifier; types without a label are
                    unknown to describe()
        """
        self._counts = dict(counts)
        self._labels = dict(labels or {})

    @classmethod
    def from_site_config(cls, site_config: SiteConfig) -> "StaticContentStore":
        """Build a store from the content_types section of a site file."""
        counts: dict[str, int] = {}
        labels: dict[str, str] = {}

        for record in site_config.content_types:
            counts[record.name] = record.published
            if record.label is not None:
                labels[record.name] = record.label

        return cls(counts, labels)

    def published_types(self) -> list[str]:
        return [name for name, count in self._counts.items() if count > 0]

    def published_count(self, content_type: str) -> int:
        return self._counts.get(content_type, 0)

    def describe(self, content_type: str) -> ContentTypeDescriptor | None:
        label = self._labels.get(content_type)
        if label is None:
            return None
        return ContentTypeDescriptor(name=content_type, plural_label=label)
