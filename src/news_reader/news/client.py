"""NewsAPI HTTP client.

Issues requests against the ``/top-headlines`` and ``/everything`` endpoints,
decoding the JSON envelope into typed Pydantic models and mapping every
transport or status failure onto :class:`NewsServiceError`.
"""

import json
import logging
from typing import Any

import httpx

from news_reader import __version__
from news_reader.news.errors import NewsServiceError, ServiceErrorKind
from news_reader.news.models import NewsResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://newsapi.org/v2"
TOP_HEADLINES_ENDPOINT = "/top-headlines"
EVERYTHING_ENDPOINT = "/everything"
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"
DEFAULT_TIMEOUT = 30.0
MAX_PAGE_SIZE = 100


def _clamp_page_size(page_size: int) -> int:
    return max(1, min(page_size, MAX_PAGE_SIZE))


class NewsApiClient:
    """Thin wrapper around the NewsAPI REST endpoints.

    Both public methods delegate to :meth:`_get` so that every request goes
    through a single chokepoint that is easy to fake with
    ``httpx.MockTransport`` in tests. The client holds no state beyond its
    transport.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = f"news-reader/{__version__}",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = DEFAULT_TIMEOUT
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._client = http_client if http_client is not None else httpx.Client(follow_redirects=True)
        self._closed = False

    def __enter__(self) -> "NewsApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_top_headlines(
        self,
        *,
        country: str = "us",
        category: str = "general",
        page_size: int = 20,
        page: int = 1,
    ) -> NewsResponse:
        """Return the top headlines for a country and category."""
        params = {
            "country": country,
            "category": category,
            "pageSize": str(_clamp_page_size(page_size)),
            "page": str(page),
        }
        return self._get(TOP_HEADLINES_ENDPOINT, params)

    def search_articles(
        self,
        query: str,
        *,
        sort_by: str = "publishedAt",
        page_size: int = 20,
        page: int = 1,
    ) -> NewsResponse:
        """Return articles matching a free-text query."""
        params = {
            "q": query,
            "sortBy": sort_by,
            "pageSize": str(_clamp_page_size(page_size)),
            "page": str(page),
        }
        return self._get(EVERYTHING_ENDPOINT, params)

    def close(self) -> None:
        """Release the underlying transport. Safe to call more than once."""
        if self._closed:
            return
        self._client.close()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _get(self, endpoint: str, params: dict[str, str]) -> NewsResponse:
        """Send a GET request and decode the response envelope.

        Raises :class:`NewsServiceError` for every failure.
        """
        if not self._api_key or self._api_key == API_KEY_PLACEHOLDER:
            raise NewsServiceError(
                "API key not configured. Set NEWS_API_KEY or api.api_key in config.yaml.",
                kind=ServiceErrorKind.CONFIGURATION,
            )

        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._client.get(
                url,
                params={**params, "apiKey": self._api_key},
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            msg = f"Request timed out after {self._timeout}s"
            raise NewsServiceError(msg, kind=ServiceErrorKind.TIMEOUT) from exc
        except httpx.TransportError as exc:
            msg = f"Network error: {exc}"
            raise NewsServiceError(msg, kind=ServiceErrorKind.NETWORK) from exc
        except Exception as exc:
            # closed client (RuntimeError), httpx.InvalidURL and other HTTPError subclasses
            msg = f"Unexpected error: {exc}"
            raise NewsServiceError(msg, kind=ServiceErrorKind.UNKNOWN) from exc

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> NewsResponse:
        status = response.status_code
        if status == 200:
            try:
                data: Any = response.json()
                envelope = NewsResponse.from_api(data)
            except (json.JSONDecodeError, ValueError, TypeError) as exc:
                msg = f"Invalid response format: {exc}"
                raise NewsServiceError(msg, kind=ServiceErrorKind.PARSING) from exc
            if not envelope.is_success:
                raise NewsServiceError(envelope.error_message, kind=ServiceErrorKind.API)
            logger.debug("Received %d articles (totalResults=%d)", len(envelope.articles), envelope.total_results)
            return envelope
        if status == 401:
            raise NewsServiceError(
                "Invalid API key. Please check your NewsAPI configuration.",
                kind=ServiceErrorKind.AUTHENTICATION,
                status_code=status,
            )
        if status == 429:
            raise NewsServiceError(
                "API rate limit exceeded. Please try again later.",
                kind=ServiceErrorKind.RATE_LIMITED,
                status_code=status,
            )
        raise NewsServiceError(
            f"HTTP {status}: {response.reason_phrase}",
            kind=ServiceErrorKind.HTTP,
            status_code=status,
            reason=response.reason_phrase,
        )
