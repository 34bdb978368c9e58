"""
Exchange rate source backed by ExchangeRate-API (v6).
"""

from typing import Dict, Any
from urllib.parse import quote
import logging

from app.sources.base_source import BaseSource, SourceError

logger = logging.getLogger(__name__)


def parse_conversion_rates(data: Any) -> Dict[str, float]:
    """
    Extract the conversion rate table from a ``/latest`` response.

    Args:
        data: Decoded response body

    Returns:
        Mapping of target currency code to rate

    Raises:
        SourceError: If the API reported an error or the rate table is missing
    """
    if not isinstance(data, dict):
        raise SourceError(ExchangeRateSource.name, "malformed response: expected an object")

    if data.get("result") == "error":
        raise SourceError(ExchangeRateSource.name, f"API error: {data.get('error-type', 'unknown')}")

    rates = data.get("conversion_rates")
    if not isinstance(rates, dict):
        raise SourceError(ExchangeRateSource.name, "malformed response: no conversion_rates")

    return rates


class ExchangeRateSource(BaseSource):
    """Latest conversion rates for a base currency"""

    name = "exchangerate-api"

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize exchange rate source.

        Args:
            config: Configuration dictionary with exchange_rate_api_key
        """
        super().__init__(config)
        self.api_key = config.get('exchange_rate_api_key') or ""
        if not self.api_key:
            logger.warning(
                "Exchange rate source initialized without API key. "
                "Rate lookups will fall back to N/A"
            )

    async def latest_rates(self, base_currency: str) -> Dict[str, float]:
        """
        Fetch the latest conversion rates.

        Args:
            base_currency: ISO currency code used as base, e.g. "KZT"

        Returns:
            Mapping of target currency code to rate

        Raises:
            SourceError: If the request fails or the body is unusable
        """
        data = await self._get_json(
            f"/v6/{quote(self.api_key, safe='')}/latest/{quote(base_currency, safe='')}"
        )
        rates = parse_conversion_rates(data)
        logger.debug(f"Fetched {len(rates)} conversion rates for base {base_currency}")
        return rates
