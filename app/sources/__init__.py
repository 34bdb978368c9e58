"""
Upstream data sources for the random-user aggregate.
"""

from app.sources.base_source import BaseSource, SourceError
from app.sources.identity_source import IdentitySource
from app.sources.country_source import (
    CountryInfoSource, RestCountriesSource, CountryLayerSource, create_country_source
)
from app.sources.exchange_rate_source import ExchangeRateSource
from app.sources.news_source import NewsSource

__all__ = [
    "BaseSource", "SourceError",
    "IdentitySource",
    "CountryInfoSource", "RestCountriesSource", "CountryLayerSource", "create_country_source",
    "ExchangeRateSource", "NewsSource"
]
