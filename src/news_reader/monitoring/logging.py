"""Logging setup: plain or structured JSON output with API key redaction."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from news_reader.config import MonitoringConfig

_API_KEY_PATTERN = re.compile(r"(apiKey=)[^&\s\"']+", re.IGNORECASE)

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def redact(text: str) -> str:
    """Mask ``apiKey`` query parameter values in *text*."""
    return _API_KEY_PATTERN.sub(r"\1***", text)


class ApiKeyRedactionFilter(logging.Filter):
    """Strip API keys from records before any handler formats them.

    httpx logs every request URL at INFO, and NewsAPI takes the key as a
    query parameter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        extra_data = getattr(record, "extra_data", None)
        if extra_data is not None:
            log_entry["data"] = extra_data
        return json.dumps(log_entry, default=str)


def setup_logging(config: MonitoringConfig) -> None:
    """Configure the root logger from monitoring config.

    Uses :class:`JSONFormatter` when ``structured_logging`` is on, a plain
    text format otherwise. Every handler gets the API key redaction filter.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.level))

    # Remove existing handlers to avoid duplicate output
    root.handlers.clear()

    formatter: logging.Formatter = JSONFormatter() if config.structured_logging else logging.Formatter(PLAIN_FORMAT)
    redaction = ApiKeyRedactionFilter()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file)))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(redaction)
        root.addHandler(handler)

    # httpx request lines are noise below WARNING unless debugging
    if config.level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
