"""news-reader: NewsAPI headlines pipeline with caching and observable state."""

__version__ = "1.0.0"
