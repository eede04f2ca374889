"""Tests for config loading."""

from pathlib import Path

import pytest
from news_reader.config import AppConfig, load_config
from news_reader.news.client import API_KEY_PLACEHOLDER
from pydantic import ValidationError

SAMPLE_YAML = """\
api:
  country: gb
  category: technology
  page_size: 50
  sort_by: relevancy

cache:
  ttl_seconds: 600

monitoring:
  structured_logging: true
  level: DEBUG
"""


def test_load_config_from_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(SAMPLE_YAML)
    config = load_config(config_file)
    assert config.api.country == "gb"
    assert config.api.category == "technology"
    assert config.api.page_size == 50
    assert config.api.sort_by == "relevancy"
    assert config.cache.ttl_seconds == 600.0
    assert config.monitoring.structured_logging is True
    assert config.monitoring.level == "DEBUG"


def test_load_empty_config(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_config(config_file) == AppConfig()


def test_default_config() -> None:
    config = AppConfig()
    assert config.api.base_url == "https://newsapi.org/v2"
    assert config.api.country == "us"
    assert config.api.category == "general"
    assert config.api.page_size == 20
    assert config.cache.ttl_seconds == 1800.0
    assert config.monitoring.structured_logging is False


def test_page_size_bounds() -> None:
    with pytest.raises(ValidationError):
        AppConfig(api={"page_size": 101})
    with pytest.raises(ValidationError):
        AppConfig(api={"page_size": 0})


def test_api_key_prefers_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEWS_API_KEY", "from-env")
    config = AppConfig(api={"api_key": "from-file"})
    assert config.api.resolve_api_key() == "from-env"


def test_api_key_falls_back_to_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    assert AppConfig(api={"api_key": "from-file"}).api.resolve_api_key() == "from-file"
    assert AppConfig().api.resolve_api_key() == API_KEY_PLACEHOLDER


def test_dotenv_beside_config_is_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NEWS_READER_TEST_KEY", raising=False)
    (tmp_path / ".env").write_text("NEWS_READER_TEST_KEY=dotenv-key\n")
    config_file = tmp_path / "config.yaml"
    config_file.write_text("api:\n  api_key_env: NEWS_READER_TEST_KEY\n")
    config = load_config(config_file)
    assert config.api.resolve_api_key() == "dotenv-key"
