"""State coordinator: the observable state machine over :class:`NewsRepository`."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace

from news_reader.news.errors import NewsRepositoryError
from news_reader.news.models import Article
from news_reader.news.repository import NewsRepository
from news_reader.state.messages import UNEXPECTED_MESSAGE, user_message

logger = logging.getLogger(__name__)

StateListener = Callable[["PipelineState"], None]


@dataclass(frozen=True)
class PipelineState:
    """Immutable snapshot of what a presentation surface should display.

    ``has_error`` and ``error_message`` are always set or cleared together.
    """

    articles: tuple[Article, ...] = ()
    is_loading: bool = False
    has_error: bool = False
    error_message: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.articles and not self.is_loading and not self.has_error

    @property
    def has_articles(self) -> bool:
        return bool(self.articles)


class NewsStateCoordinator:
    """Track loading, error and data status for one consumer.

    Each mutation swaps in a new :class:`PipelineState` under a lock and is
    pushed to subscribed listeners before the mutating call returns. At most
    one fetch or search runs at a time: a call made while another is in
    flight returns immediately. Failures never escape; they become error
    state and leave the displayed articles untouched.
    """

    def __init__(
        self,
        repository: NewsRepository,
        *,
        default_country: str = "us",
        default_category: str = "general",
        page_size: int = 20,
        sort_by: str = "publishedAt",
    ) -> None:
        self._repository = repository
        self._default_country = default_country
        self._default_category = default_category
        self._page_size = page_size
        self._sort_by = sort_by
        self._state = PipelineState()
        self._lock = threading.Lock()
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def articles(self) -> list[Article]:
        return list(self._state.articles)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def has_error(self) -> bool:
        return self._state.has_error

    @property
    def error_message(self) -> str | None:
        return self._state.error_message

    @property
    def is_empty(self) -> bool:
        return self._state.is_empty

    @property
    def has_articles(self) -> bool:
        return self._state.has_articles

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked with every new state."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def fetch_top_headlines(
        self,
        *,
        force_refresh: bool = False,
        country: str | None = None,
        category: str | None = None,
    ) -> None:
        """Load headlines into the displayed collection."""
        country = country or self._default_country
        category = category or self._default_category
        self._run(
            lambda: self._repository.get_top_headlines(
                force_refresh=force_refresh,
                country=country,
                category=category,
                page_size=self._page_size,
            ),
            f"headlines country={country} category={category}",
        )

    def search_articles(self, query: str, *, sort_by: str | None = None) -> None:
        """Replace the displayed collection with search results."""
        sort_by = sort_by or self._sort_by
        self._run(
            lambda: self._repository.search_articles(query, sort_by=sort_by, page_size=self._page_size),
            f"search query={query!r}",
        )

    def refresh_articles(self) -> None:
        self.fetch_top_headlines(force_refresh=True)

    def get_article_by_url(self, url: str) -> Article | None:
        """Find an article among those displayed, falling back to the repository cache."""
        for article in self._state.articles:
            if article.url == url:
                return article
        return self._repository.get_article_by_url(url)

    def clear_articles(self) -> None:
        self._update(articles=(), has_error=False, error_message=None)

    def clear_error(self) -> None:
        self._update(has_error=False, error_message=None)

    def close(self) -> None:
        """Release the repository (and through it, the HTTP client)."""
        self._repository.close()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _run(self, operation: Callable[[], list[Article]], description: str) -> None:
        with self._lock:
            if self._state.is_loading:
                logger.debug("Ignoring %s: another request is in flight", description)
                return
            self._state = replace(self._state, is_loading=True, has_error=False, error_message=None)
            snapshot = self._state
        self._notify(snapshot)

        try:
            articles = operation()
        except NewsRepositoryError as exc:
            logger.warning("Request failed (%s): %s [%s]", description, exc.message, exc.kind.value)
            self._update(is_loading=False, has_error=True, error_message=user_message(exc))
            return
        except Exception:
            logger.exception("Unexpected error during %s", description)
            self._update(is_loading=False, has_error=True, error_message=UNEXPECTED_MESSAGE)
            return

        self._update(articles=tuple(articles), is_loading=False)
        logger.info("Loaded %d articles (%s)", len(articles), description)

    def _update(self, **changes: object) -> None:
        with self._lock:
            self._state = replace(self._state, **changes)  # type: ignore[arg-type]
            snapshot = self._state
        self._notify(snapshot)

    def _notify(self, state: PipelineState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)
