"""Configuration settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from urldetector.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="URLDETECTOR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Site description
    site_config_path: Path = Field(
        default=Path("site.yaml"),
        description="YAML file describing the site to scan",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Path | None = Field(default=None, description="Optional JSONL log file")


class ContentTypeRecord(BaseModel):
    """Published content type as listed in the site file."""

    name: str = Field(..., description="Content type identifier, e.g. 'post'")
    published: int = Field(default=0, ge=0, description="Number of published items")
    label: str | None = Field(default=None, description="Plural label, e.g. 'Posts'")


class SiteConfig(BaseModel):
    """Everything the detectors need to know about one site."""

    home_url: str = Field(..., description="Fully qualified home URL")
    site_url: str = Field(default="", description="Fully qualified site URL")
    site_path: str | None = Field(default=None, description="Site root on disk")

    # Pagination
    pagination_base: str = Field(default="page", description="Pagination base segment")
    posts_per_page: int = Field(default=10, description="Default page size")
    posts_page_link: str | None = Field(
        default=None,
        description="Archive link of the primary content type, when one is set",
    )
    primary_content_type: str = Field(default="post", description="Primary content type")
    page_content_type: str = Field(default="page", description="Hierarchical page type")

    # Files
    filenames_to_ignore: list[str] = Field(default_factory=list)
    extensions_to_ignore: list[str] = Field(default_factory=list)
    scan_dirs: list[str] = Field(
        default_factory=list,
        description="Directories to map to URLs (defaults to site_path)",
    )

    content_types: list[ContentTypeRecord] = Field(default_factory=list)

    def get_scan_dirs(self) -> list[str]:
        """Directories to walk for static files."""
        if self.scan_dirs:
            return list(self.scan_dirs)
        if self.site_path:
            return [self.site_path]
        return []


def load_site_config(config_path: Path) -> SiteConfig:
    """
    Load a site description from a YAML file.

    Args:
        config_path: Path to the YAML site file

    Returns:
        Validated SiteConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Site config not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Site config must be a mapping: {config_path}")

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid site config {config_path}: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
