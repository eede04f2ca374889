"""Error taxonomy shared by the client and repository layers."""

from enum import Enum


class ServiceErrorKind(str, Enum):
    """Failure categories raised by :class:`~news_reader.news.client.NewsApiClient`."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTHENTICATION = "authentication"
    RATE_LIMITED = "rate_limited"
    PARSING = "parsing"
    API = "api"
    HTTP = "http"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class RepositoryErrorKind(str, Enum):
    """Failure categories raised by :class:`~news_reader.news.repository.NewsRepository`.

    Mirrors :class:`ServiceErrorKind` member for member, plus ``VALIDATION``
    for input rejected before any request is made.
    """

    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTHENTICATION = "authentication"
    RATE_LIMITED = "rate_limited"
    PARSING = "parsing"
    API = "api"
    HTTP = "http"
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UNKNOWN = "unknown"

    @classmethod
    def from_service(cls, kind: ServiceErrorKind) -> "RepositoryErrorKind":
        """Translate a service error kind to the same-named repository kind."""
        return cls(kind.value)


class NewsError(Exception):
    """Base class for all news pipeline errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NewsServiceError(NewsError):
    """A request to the news API failed."""

    def __init__(
        self,
        message: str,
        *,
        kind: ServiceErrorKind,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.reason = reason


class NewsRepositoryError(NewsError):
    """A repository operation failed; ``__cause__`` holds the service error, if any."""

    def __init__(self, message: str, *, kind: RepositoryErrorKind) -> None:
        super().__init__(message)
        self.kind = kind
