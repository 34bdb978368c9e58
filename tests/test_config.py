"""
Test suite for application settings
"""
import pytest
from pydantic import ValidationError

from app.config import Settings


def test_defaults():
    """Test defaults without any environment"""
    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.COUNTRY_PROVIDER == "restcountries"
    assert settings.HTTP_TIMEOUT > 0
    assert settings.news_page_size == 5


def test_news_page_size_clamped():
    assert Settings(_env_file=None, NEWS_PAGE_SIZE=50).news_page_size == 5
    assert Settings(_env_file=None, NEWS_PAGE_SIZE=3).news_page_size == 3
    assert Settings(_env_file=None, NEWS_PAGE_SIZE=0).news_page_size == 1
    assert Settings(_env_file=None, NEWS_PAGE_SIZE=-4).news_page_size == 1


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "from-env")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.NEWS_API_KEY == "from-env"
    assert settings.PORT == 8080


def test_settings_are_immutable():
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.PORT = 9000
