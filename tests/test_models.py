"""Tests for NewsAPI data models."""

from datetime import datetime, timezone

import pytest
from news_reader.news.models import Article, NewsResponse, Source

RAW_ARTICLE = {
    "source": {"id": "bbc-news", "name": "BBC News"},
    "author": "Jane Doe",
    "title": "Markets rally",
    "description": "Stocks climbed on Tuesday.",
    "url": "https://example.com/markets",
    "urlToImage": "https://example.com/markets.jpg",
    "publishedAt": "2026-10-18T09:30:00Z",
    "content": "Full text",
}


def test_article_from_api_maps_wire_names() -> None:
    article = Article.from_api(RAW_ARTICLE)
    assert article.title == "Markets rally"
    assert article.image_url == "https://example.com/markets.jpg"
    assert article.published_at == datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)
    assert article.source == Source(id="bbc-news", name="BBC News")
    assert article.author == "Jane Doe"


def test_article_from_api_coerces_nulls() -> None:
    article = Article.from_api({"title": None, "url": None, "source": {"id": None, "name": "Wire"}})
    assert article.title == ""
    assert article.url == ""
    assert article.published_at is None
    assert article.source is not None
    assert article.source.id is None


def test_articles_with_same_url_are_equal() -> None:
    a = Article(title="First title", url="https://example.com/x")
    b = Article(title="Edited title", url="https://example.com/x", author="Someone")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_articles_with_different_urls_differ() -> None:
    a = Article(title="Same", url="https://example.com/a")
    b = Article(title="Same", url="https://example.com/b")
    assert a != b


def test_article_is_immutable() -> None:
    article = Article(title="t", url="u")
    with pytest.raises(ValueError):
        article.title = "changed"  # type: ignore[misc]


def test_source_equality_uses_id_and_name() -> None:
    assert Source(id="cnn", name="CNN") == Source(id="cnn", name="CNN")
    assert Source(id="cnn", name="CNN") != Source(id=None, name="CNN")
    assert hash(Source(id="cnn", name="CNN")) == hash(Source(id="cnn", name="CNN"))


def test_article_to_api_uses_wire_names() -> None:
    data = Article.from_api(RAW_ARTICLE).to_api()
    assert data["urlToImage"] == "https://example.com/markets.jpg"
    assert data["source"] == {"id": "bbc-news", "name": "BBC News"}
    assert data["publishedAt"].startswith("2026-10-18T09:30:00")


def test_response_from_api() -> None:
    response = NewsResponse.from_api({"status": "ok", "totalResults": 1, "articles": [RAW_ARTICLE]})
    assert response.is_success
    assert response.total_results == 1
    assert response.articles[0].url == "https://example.com/markets"


def test_response_error_envelope() -> None:
    response = NewsResponse.from_api({"status": "error", "code": "parameterInvalid", "message": "Bad country"})
    assert not response.is_success
    assert response.error_message == "Bad country"
    assert response.articles == []


def test_response_ok_with_code_is_not_success() -> None:
    response = NewsResponse.from_api({"status": "ok", "code": "weird", "articles": []})
    assert not response.is_success
    assert response.error_message == "Unknown error occurred"


def test_response_rejects_non_object() -> None:
    with pytest.raises(ValueError):
        NewsResponse.from_api(["not", "an", "envelope"])


def test_response_rejects_bad_date() -> None:
    with pytest.raises(ValueError):
        NewsResponse.from_api({"status": "ok", "articles": [{"title": "t", "url": "u", "publishedAt": "yesterday"}]})
