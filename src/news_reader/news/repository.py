"""Repository: the cached, validated view over a :class:`NewsSource`."""

import logging
import time
from collections.abc import Callable

from news_reader.news.cache import DEFAULT_TTL, ArticleCache
from news_reader.news.errors import NewsRepositoryError, NewsServiceError, RepositoryErrorKind
from news_reader.news.models import REMOVED_TITLE, Article
from news_reader.news.provider import NewsSource

logger = logging.getLogger(__name__)


def is_valid_article(article: Article) -> bool:
    """Return True if the article has a title and URL and was not redacted upstream."""
    return bool(article.title) and bool(article.url) and article.title != REMOVED_TITLE


class NewsRepository:
    """Single source of truth for headline data.

    Headlines are cached for ``cache_ttl`` seconds (default 30 minutes).
    Search results bypass the cache entirely. Service failures are
    re-raised as :class:`NewsRepositoryError` without touching the cache,
    so a failed refresh never discards a previously fetched collection.
    """

    def __init__(
        self,
        source: NewsSource,
        *,
        cache_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._cache = ArticleCache(ttl=cache_ttl, clock=clock)

    def get_top_headlines(
        self,
        *,
        force_refresh: bool = False,
        country: str = "us",
        category: str = "general",
        page_size: int = 20,
    ) -> list[Article]:
        if not force_refresh:
            cached = self._cache.get()
            if cached is not None:
                logger.debug("Headline cache hit (%d articles)", len(cached))
                return cached

        try:
            response = self._source.get_top_headlines(country=country, category=category, page_size=page_size)
        except NewsServiceError as exc:
            raise NewsRepositoryError(
                f"Failed to fetch headlines: {exc.message}",
                kind=RepositoryErrorKind.from_service(exc.kind),
            ) from exc
        except Exception as exc:
            raise NewsRepositoryError(
                f"Unexpected error while fetching headlines: {exc}",
                kind=RepositoryErrorKind.UNKNOWN,
            ) from exc

        articles = [a for a in response.articles if is_valid_article(a)]
        dropped = len(response.articles) - len(articles)
        if dropped:
            logger.debug("Dropped %d invalid articles from headlines", dropped)
        self._cache.set(articles)
        logger.info("Fetched %d headlines (country=%s, category=%s)", len(articles), country, category)
        return articles

    def search_articles(
        self,
        query: str,
        *,
        sort_by: str = "publishedAt",
        page_size: int = 20,
    ) -> list[Article]:
        """Search all articles. Results are filtered but never cached."""
        trimmed = query.strip()
        if not trimmed:
            raise NewsRepositoryError("Search query cannot be empty", kind=RepositoryErrorKind.VALIDATION)

        try:
            response = self._source.search_articles(trimmed, sort_by=sort_by, page_size=page_size)
        except NewsServiceError as exc:
            raise NewsRepositoryError(
                f"Search failed: {exc.message}",
                kind=RepositoryErrorKind.from_service(exc.kind),
            ) from exc
        except Exception as exc:
            raise NewsRepositoryError(
                f"Unexpected error during search: {exc}",
                kind=RepositoryErrorKind.UNKNOWN,
            ) from exc

        articles = [a for a in response.articles if is_valid_article(a)]
        logger.info("Search for %r returned %d articles", trimmed, len(articles))
        return articles

    def get_article_by_url(self, url: str) -> Article | None:
        """Find an article in the last fetched headlines, stale or not."""
        cached = self._cache.peek()
        if cached is None:
            return None
        return next((a for a in cached if a.url == url), None)

    def clear_cache(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._source.close()
        self.clear_cache()
