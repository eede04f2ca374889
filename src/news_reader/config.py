"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from news_reader.news.client import API_KEY_PLACEHOLDER, DEFAULT_BASE_URL, MAX_PAGE_SIZE


class ApiConfig(BaseModel):
    """NewsAPI connection and query defaults."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = API_KEY_PLACEHOLDER
    api_key_env: str = "NEWS_API_KEY"
    country: str = "us"
    category: str = "general"
    page_size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)
    sort_by: Literal["relevancy", "popularity", "publishedAt"] = "publishedAt"

    def resolve_api_key(self) -> str:
        """Return the key from ``api_key_env`` if set, else the configured value."""
        return os.environ.get(self.api_key_env) or self.api_key


class CacheConfig(BaseModel):
    """Headline cache configuration."""

    ttl_seconds: float = Field(default=1800.0, ge=0)


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    structured_logging: bool = False
    log_file: str | None = None
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class AppConfig(BaseModel):
    """Top-level application configuration."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from a YAML file."""
    load_dotenv(path.parent / ".env", override=False)
    return AppConfig(**(yaml.safe_load(path.read_text()) or {}))
