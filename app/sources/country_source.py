"""
Country information sources.

Two interchangeable providers implement ``CountryInfoSource``: the keyless
REST Countries API and the keyed countrylayer API. ``create_country_source``
picks one from settings.
"""

from abc import abstractmethod
from typing import Dict, Any, Optional, List
from urllib.parse import quote
import httpx
import logging

from app.sources.base_source import BaseSource, SourceError
from app.schemas.aggregate import CountryRecord, NOT_AVAILABLE

logger = logging.getLogger(__name__)


def _join_languages(names: List[str]) -> str:
    names = [name for name in names if name]
    return ", ".join(names) if names else NOT_AVAILABLE


class CountryInfoSource(BaseSource):
    """Look up country metadata by country name"""

    @abstractmethod
    async def lookup(self, country_name: str) -> Optional[CountryRecord]:
        """
        Look up a country by name.

        Args:
            country_name: Country name as returned by the identity source

        Returns:
            CountryRecord for the first match, or None if nothing matched

        Raises:
            SourceError: If the request fails or the body is malformed
        """
        pass


def parse_restcountries(data: Any, country_name: str) -> Optional[CountryRecord]:
    """
    Convert a REST Countries v3.1 ``/name`` response into a CountryRecord.

    Args:
        data: Decoded response body (a list of country objects)
        country_name: Lookup key, echoed when the match has no name

    Returns:
        CountryRecord for the match whose common name equals the lookup key,
        else the first match, or None for an empty result
    """
    if not data:
        return None

    try:
        # /name matches partial names, e.g. "United States" also hits the Minor Outlying Islands
        wanted = country_name.strip().casefold()
        country = next(
            (
                c for c in data
                if isinstance(c, dict)
                and str((c.get("name") or {}).get("common") or "").casefold() == wanted
            ),
            data[0]
        )

        capitals = country.get("capital") or []
        currencies = country.get("currencies") or {}
        languages = country.get("languages") or {}
        flags = country.get("flags") or {}

        return CountryRecord(
            country_name=(country.get("name") or {}).get("common") or country_name,
            capital=capitals[0] if capitals else NOT_AVAILABLE,
            languages=_join_languages(list(languages.values())),
            currency=next(iter(currencies), None),
            flag=flags.get("png") or flags.get("svg") or None
        )
    except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
        raise SourceError(RestCountriesSource.name, f"malformed response: {e!r}") from e


def parse_countrylayer(data: Any, country_name: str) -> Optional[CountryRecord]:
    """
    Convert a countrylayer v2 ``/name`` response into a CountryRecord.

    Args:
        data: Decoded response body (a list of country objects, or an error object)
        country_name: Lookup key, echoed when the match has no name

    Returns:
        CountryRecord for the first match, or None for an empty result

    Raises:
        SourceError: If the body is an API error object or malformed
    """
    if isinstance(data, dict):
        # countrylayer reports bad keys and quota errors as {"success": false, "error": {...}}
        error = data.get("error") or {}
        raise SourceError(
            CountryLayerSource.name,
            f"API error {error.get('code')}: {error.get('info') or error.get('type')}"
        )

    if not data:
        return None

    try:
        country = data[0]

        currencies = country.get("currencies") or []
        languages = country.get("languages") or []

        return CountryRecord(
            country_name=country.get("name") or country_name,
            capital=country.get("capital") or NOT_AVAILABLE,
            languages=_join_languages([lang.get("name") for lang in languages]),
            currency=currencies[0].get("code") if currencies else None,
            flag=country.get("flag") or None
        )
    except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
        raise SourceError(CountryLayerSource.name, f"malformed response: {e!r}") from e


class RestCountriesSource(CountryInfoSource):
    """Keyless public REST Countries API"""

    name = "restcountries"

    async def lookup(self, country_name: str) -> Optional[CountryRecord]:
        data = await self._get_json(
            f"/v3.1/name/{quote(country_name, safe='')}",
            allow_not_found=True
        )
        return parse_restcountries(data, country_name)


class CountryLayerSource(CountryInfoSource):
    """Keyed countrylayer API"""

    name = "countrylayer"

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize countrylayer source.

        Args:
            config: Configuration dictionary with countrylayer_api_key

        Raises:
            ValueError: If API key is missing
        """
        super().__init__(config)
        self.api_key = config.get('countrylayer_api_key')
        if not self.api_key:
            raise ValueError("countrylayer API key is required")

    async def lookup(self, country_name: str) -> Optional[CountryRecord]:
        data = await self._get_json(
            f"/v2/name/{quote(country_name, safe='')}",
            params={"access_key": self.api_key},
            allow_not_found=True
        )
        return parse_countrylayer(data, country_name)


COUNTRY_PROVIDERS = {
    RestCountriesSource.name: RestCountriesSource,
    CountryLayerSource.name: CountryLayerSource,
}


def create_country_source(
    settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> CountryInfoSource:
    """
    Build the country information provider selected in settings.

    Args:
        settings: Application settings
        transport: Optional httpx transport shared by all sources

    Returns:
        Configured CountryInfoSource

    Raises:
        ValueError: If COUNTRY_PROVIDER names an unknown provider
    """
    provider = settings.COUNTRY_PROVIDER.strip().lower()
    source_class = COUNTRY_PROVIDERS.get(provider)
    if source_class is None:
        raise ValueError(
            f"Unknown COUNTRY_PROVIDER '{settings.COUNTRY_PROVIDER}'. "
            f"Expected one of: {', '.join(COUNTRY_PROVIDERS)}"
        )

    base_urls = {
        RestCountriesSource.name: settings.RESTCOUNTRIES_API_URL,
        CountryLayerSource.name: settings.COUNTRYLAYER_API_URL,
    }

    logger.info(f"Using country information provider: {provider}")
    return source_class({
        'base_url': base_urls[provider],
        'countrylayer_api_key': settings.COUNTRYLAYER_API_KEY,
        'timeout': settings.HTTP_TIMEOUT,
        'transport': transport
    })
