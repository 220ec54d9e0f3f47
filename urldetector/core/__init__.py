"""Core value types and content access."""

from urldetector.core.content_store import (
    ContentStore,
    ContentTypeDescriptor,
    StaticContentStore,
)
from urldetector.core.models import ContentTypeInfo, PaginationSettings

__all__ = [
    "ContentStore",
    "ContentTypeDescriptor",
    "StaticContentStore",
    "ContentTypeInfo",
    "PaginationSettings",
]
