"""Single-slot TTL cache for the latest headline collection."""

import time
from collections.abc import Callable, Sequence

from news_reader.news.models import Article

DEFAULT_TTL = 30 * 60.0


class ArticleCache:
    """In-memory cache holding one article collection and its fetch time.

    There is no per-query keying: :meth:`set` replaces the previous entry
    wholesale. Expiry only affects :meth:`get`; the stale entry stays
    readable through :meth:`peek` until it is replaced or cleared.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._articles: tuple[Article, ...] | None = None
        self._fetched_at: float | None = None

    def get(self) -> list[Article] | None:
        """Return the cached collection if it is younger than the TTL."""
        if self._articles is None or self._fetched_at is None:
            return None
        if self._clock() - self._fetched_at >= self._ttl:
            return None
        return list(self._articles)

    def peek(self) -> list[Article] | None:
        """Return the cached collection regardless of age."""
        if self._articles is None:
            return None
        return list(self._articles)

    def set(self, articles: Sequence[Article]) -> None:
        self._articles = tuple(articles)
        self._fetched_at = self._clock()

    def clear(self) -> None:
        self._articles = None
        self._fetched_at = None

    @property
    def fetched_at(self) -> float | None:
        return self._fetched_at

    @property
    def ttl(self) -> float:
        return self._ttl
