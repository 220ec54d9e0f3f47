"""Value types shared by the detectors."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContentTypeInfo(BaseModel):
    """
    A published content type and what is needed to paginate its archive.

    `is_primary` marks the type whose archive is the site's main listing
    (it may live under a custom archive slug). `is_page` marks the built-in
    hierarchical page type, which has no paginated archive.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    published_count: int = Field(ge=0)
    plural_label: str
    is_primary: bool = False
    is_page: bool = False

    @field_validator("plural_label")
    @classmethod
    def lowercase_label(cls, value: str) -> str:
        return value.lower()


class PaginationSettings(BaseModel):
    """Site-wide pagination settings."""

    model_config = ConfigDict(frozen=True)

    # Not validated here: detect_pagination_urls raises InvalidConfiguration
    base_segment: str = "page"
    default_page_size: int = 10
