"""News data layer: API client, models, cache and repository."""

from news_reader.news.client import NewsApiClient
from news_reader.news.models import Article, NewsResponse, Source
from news_reader.news.provider import NewsSource
from news_reader.news.repository import NewsRepository

__all__ = ["Article", "NewsApiClient", "NewsRepository", "NewsResponse", "NewsSource", "Source"]
