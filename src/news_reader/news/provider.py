"""NewsSource protocol defining the remote fetch interface."""

from typing import Protocol

from news_reader.news.models import NewsResponse


class NewsSource(Protocol):
    """Structural protocol for remote news sources.

    :class:`~news_reader.news.client.NewsApiClient` satisfies it; tests
    substitute fakes without touching the network.
    """

    def get_top_headlines(
        self,
        *,
        country: str = "us",
        category: str = "general",
        page_size: int = 20,
        page: int = 1,
    ) -> NewsResponse: ...

    def search_articles(
        self,
        query: str,
        *,
        sort_by: str = "publishedAt",
        page_size: int = 20,
        page: int = 1,
    ) -> NewsResponse: ...

    def close(self) -> None: ...
