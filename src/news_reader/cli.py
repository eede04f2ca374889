"""CLI entry point for news-reader."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from news_reader import __version__
from news_reader.config import AppConfig, load_config
from news_reader.monitoring.logging import setup_logging
from news_reader.news.client import NewsApiClient
from news_reader.news.models import Article
from news_reader.news.repository import NewsRepository
from news_reader.state.coordinator import NewsStateCoordinator

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"news-reader {__version__}")
        raise typer.Exit()


app = typer.Typer(name="news-reader", help="News Reader: NewsAPI headlines and search from the terminal")


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True)
    ] = False,
) -> None:
    """News Reader: NewsAPI headlines and search from the terminal."""


DEFAULT_CONFIG = Path("config.yaml")

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to config.yaml")]
JsonOption = Annotated[bool, typer.Option("--json", help="Print articles as JSON")]


def _load_config(config_path: Path) -> AppConfig:
    """Load config from file, warning if the file does not exist."""
    if config_path.exists():
        return load_config(config_path)
    logger.warning("Config file %s not found, using defaults", config_path)
    return AppConfig()


def _build_coordinator(cfg: AppConfig) -> NewsStateCoordinator:
    """Wire client, repository and coordinator from config."""
    client = NewsApiClient(
        cfg.api.resolve_api_key(),
        base_url=cfg.api.base_url,
    )
    repository = NewsRepository(client, cache_ttl=cfg.cache.ttl_seconds)
    return NewsStateCoordinator(
        repository,
        default_country=cfg.api.country,
        default_category=cfg.api.category,
        page_size=cfg.api.page_size,
        sort_by=cfg.api.sort_by,
    )


def _format_article(index: int, article: Article) -> str:
    source = article.source.name if article.source else "unknown source"
    published = article.published_at.strftime("%b %d, %Y %H:%M") if article.published_at else "undated"
    return f"{index:>3}. {article.title}\n     {source} · {published}\n     {article.url}"


def _emit(coordinator: NewsStateCoordinator, as_json: bool) -> None:
    """Print the coordinator's articles, or its error and exit non-zero."""
    if coordinator.has_error:
        typer.echo(coordinator.error_message, err=True)
        raise typer.Exit(code=1)
    if as_json:
        typer.echo(json.dumps([a.to_api() for a in coordinator.articles], indent=2))
        return
    if coordinator.is_empty:
        typer.echo("No articles found.")
        return
    for i, article in enumerate(coordinator.articles, start=1):
        typer.echo(_format_article(i, article))


@app.command()
def headlines(
    config: ConfigOption = DEFAULT_CONFIG,
    country: Annotated[str | None, typer.Option("--country", help="Two-letter country code")] = None,
    category: Annotated[str | None, typer.Option("--category", help="News category, e.g. business")] = None,
    refresh: Annotated[bool, typer.Option("--refresh", help="Bypass the headline cache")] = False,
    as_json: JsonOption = False,
) -> None:
    """Show top headlines."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring)
    coordinator = _build_coordinator(cfg)
    try:
        coordinator.fetch_top_headlines(force_refresh=refresh, country=country, category=category)
        _emit(coordinator, as_json)
    finally:
        coordinator.close()


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Free-text search query")],
    config: ConfigOption = DEFAULT_CONFIG,
    sort_by: Annotated[
        str | None, typer.Option("--sort-by", help="relevancy, popularity or publishedAt")
    ] = None,
    as_json: JsonOption = False,
) -> None:
    """Search all articles."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring)
    coordinator = _build_coordinator(cfg)
    try:
        coordinator.search_articles(query, sort_by=sort_by)
        _emit(coordinator, as_json)
    finally:
        coordinator.close()


@app.command()
def show(
    url: Annotated[str, typer.Argument(help="URL of a current headline")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Show the full details of one headline."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring)
    coordinator = _build_coordinator(cfg)
    try:
        coordinator.fetch_top_headlines()
        article = coordinator.get_article_by_url(url)
        if article is None:
            if coordinator.has_error:
                typer.echo(coordinator.error_message, err=True)
            else:
                typer.echo(f"No current headline with URL {url}", err=True)
            raise typer.Exit(code=1)
        typer.echo(article.title)
        if article.author:
            typer.echo(f"By {article.author}")
        if article.source:
            typer.echo(article.source.name)
        if article.published_at:
            typer.echo(article.published_at.strftime("%b %d, %Y %H:%M"))
        for text in (article.description, article.content):
            if text:
                typer.echo("")
                typer.echo(text)
        typer.echo("")
        typer.echo(article.url)
    finally:
        coordinator.close()
