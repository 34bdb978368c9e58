"""
Random User Aggregator
Chains the identity, country, exchange-rate and news sources into one response.
"""

from typing import List, Optional
import asyncio
import httpx
import logging

from app.config import Settings
from app.schemas.aggregate import (
    AggregateResponse,
    CountryRecord,
    ExchangeRateRecord,
    IdentityRecord,
    NewsArticleRecord,
    NOT_AVAILABLE
)
from app.sources.base_source import SourceError
from app.sources.identity_source import IdentitySource
from app.sources.country_source import CountryInfoSource, create_country_source
from app.sources.exchange_rate_source import ExchangeRateSource
from app.sources.news_source import NewsSource

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to fetch data. Please try again."


class Aggregator:
    """
    Builds one aggregate response per request:

    1. identity (fatal on failure)
    2. country lookup by the identity's country name
    3. exchange rates for the country's currency, only if one was resolved
    4. news headlines about the country

    Steps 2-4 fall back to documented defaults instead of failing the request.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize aggregator and its sources.

        Args:
            settings: Application settings
            transport: Optional httpx transport for all upstream calls (tests)

        Raises:
            ValueError: If the configured country provider is unknown or misconfigured
        """
        self.settings = settings

        self.identity_source = IdentitySource({
            'base_url': settings.RANDOMUSER_API_URL,
            'timeout': settings.HTTP_TIMEOUT,
            'transport': transport
        })
        self.country_source: CountryInfoSource = create_country_source(settings, transport)
        self.exchange_rate_source = ExchangeRateSource({
            'base_url': settings.EXCHANGE_RATE_API_URL,
            'exchange_rate_api_key': settings.EXCHANGE_RATE_API_KEY,
            'timeout': settings.HTTP_TIMEOUT,
            'transport': transport
        })
        self.news_source = NewsSource({
            'base_url': settings.NEWS_API_URL,
            'news_api_key': settings.NEWS_API_KEY,
            'language': settings.NEWS_LANGUAGE,
            'page_size': settings.news_page_size,
            'timeout': settings.HTTP_TIMEOUT,
            'transport': transport
        })

    async def handle(self) -> AggregateResponse:
        """
        Run the full pipeline for one inbound request.

        Returns:
            AggregateResponse, successful unless the identity source failed
        """
        try:
            user = await self.identity_source.fetch_identity()
        except SourceError as e:
            logger.error(f"Identity fetch failed: {e}")
            return AggregateResponse(success=False, error=GENERIC_ERROR_MESSAGE)

        country = await self._lookup_country(user)

        # Exchange rates and news don't depend on each other
        exchange_rates, news = await asyncio.gather(
            self._lookup_exchange_rates(country),
            self._search_news(user)
        )

        return AggregateResponse(
            success=True,
            user=user,
            country=country,
            exchange_rates=exchange_rates,
            news=news
        )

    async def _lookup_country(self, user: IdentityRecord) -> CountryRecord:
        try:
            country = await self.country_source.lookup(user.country)
        except SourceError as e:
            logger.warning(f"Country lookup failed for '{user.country}': {e}")
            return CountryRecord.degraded(user.country)

        if country is None:
            logger.warning(f"Country lookup found no match for '{user.country}'")
            return CountryRecord.degraded(user.country)

        return country

    async def _lookup_exchange_rates(self, country: CountryRecord) -> Optional[ExchangeRateRecord]:
        """
        Fetch USD and KZT rates for the country's currency.

        Returns None (no call made) when the country has no currency. When the
        call fails both rates are "N/A" but the record is still returned.
        """
        if not country.currency:
            logger.info(f"No currency resolved for {country.country_name}, skipping exchange rates")
            return None

        try:
            rates = await self.exchange_rate_source.latest_rates(country.currency)
        except SourceError as e:
            logger.warning(f"Exchange rate lookup failed for {country.currency}: {e}")
            return ExchangeRateRecord(base_currency=country.currency)

        return ExchangeRateRecord(
            base_currency=country.currency,
            usd=_rate_or_not_available(rates.get("USD")),
            kzt=_rate_or_not_available(rates.get("KZT"))
        )

    async def _search_news(self, user: IdentityRecord) -> List[NewsArticleRecord]:
        try:
            return await self.news_source.search(user.country)
        except SourceError as e:
            logger.warning(f"News search failed for '{user.country}': {e}")
            return []


def _rate_or_not_available(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return NOT_AVAILABLE
    return float(value)
