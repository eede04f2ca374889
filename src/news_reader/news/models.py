"""Pydantic data models for NewsAPI JSON payloads."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

REMOVED_TITLE = "[Removed]"


def _str_field(data: dict[str, Any], key: str) -> str:
    """Extract a required string field, coercing null to empty string."""
    return data.get(key) or ""


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    """Extract an optional string field, treating empty strings as absent."""
    return data.get(key) or None


class Source(BaseModel):
    """The publisher an article came from."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Source":
        """Parse a ``source`` object from the NewsAPI response."""
        return cls(id=_optional_str(data, "id"), name=_str_field(data, "name"))


class Article(BaseModel):
    """A single news article.

    Two articles are the same article when their URLs match, whatever the
    other fields say. The URL is the lookup and dedup key everywhere.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str
    description: str | None = None
    content: str | None = None
    author: str | None = None
    url: str
    image_url: str | None = None
    published_at: datetime | None = None
    source: Source | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Article):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Article":
        """Parse an article dict from the NewsAPI JSON output."""
        source = data.get("source")
        return cls(
            id=_optional_str(data, "id"),
            title=_str_field(data, "title"),
            description=_optional_str(data, "description"),
            content=_optional_str(data, "content"),
            author=_optional_str(data, "author"),
            url=_str_field(data, "url"),
            image_url=_optional_str(data, "urlToImage"),
            published_at=data.get("publishedAt") or None,
            source=Source.from_api(source) if isinstance(source, dict) else None,
        )

    def to_api(self) -> dict[str, Any]:
        """Serialize back to the NewsAPI wire shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "author": self.author,
            "url": self.url,
            "urlToImage": self.image_url,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "source": self.source.model_dump() if self.source else None,
        }


class NewsResponse(BaseModel):
    """Response envelope returned by both NewsAPI endpoints."""

    status: str
    total_results: int = 0
    articles: list[Article] = Field(default_factory=list)
    code: str | None = None
    message: str | None = None

    @classmethod
    def from_api(cls, data: Any) -> "NewsResponse":
        """Parse a decoded response body.

        Raises :class:`ValueError` (pydantic's ``ValidationError`` included)
        when the body does not have the envelope shape.
        """
        if not isinstance(data, dict):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise ValueError(msg)
        raw_articles = data.get("articles") or []
        if not isinstance(raw_articles, list):
            msg = "'articles' is not a list"
            raise ValueError(msg)
        return cls(
            status=_str_field(data, "status"),
            total_results=int(data.get("totalResults") or 0),
            articles=[Article.from_api(a) for a in raw_articles if isinstance(a, dict)],
            code=_optional_str(data, "code"),
            message=_optional_str(data, "message"),
        )

    @property
    def is_success(self) -> bool:
        return self.status == "ok" and self.code is None

    @property
    def error_message(self) -> str:
        return self.message or "Unknown error occurred"
