"""
Configuration management for the Random Profile Aggregator
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Configuration
    PROJECT_NAME: str = "Random Profile Aggregator"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    STATIC_DIR: str = "public"

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Outbound calls
    HTTP_TIMEOUT: float = 10.0  # seconds, per upstream call

    # Country information provider: "restcountries" (keyless) or "countrylayer"
    COUNTRY_PROVIDER: str = "restcountries"

    # Upstream API keys
    COUNTRYLAYER_API_KEY: str = ""
    EXCHANGE_RATE_API_KEY: str = ""
    NEWS_API_KEY: str = ""

    # Upstream base URLs
    RANDOMUSER_API_URL: str = "https://randomuser.me"
    RESTCOUNTRIES_API_URL: str = "https://restcountries.com"
    COUNTRYLAYER_API_URL: str = "https://api.countrylayer.com"
    EXCHANGE_RATE_API_URL: str = "https://v6.exchangerate-api.com"
    NEWS_API_URL: str = "https://newsapi.org"

    # News search
    NEWS_PAGE_SIZE: int = 5
    NEWS_LANGUAGE: str = "en"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        frozen=True
    )

    @property
    def news_page_size(self) -> int:
        """News result cap, between 1 and 5 articles"""
        return max(1, min(self.NEWS_PAGE_SIZE, 5))


# Global settings instance
settings = Settings()
