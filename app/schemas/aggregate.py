"""
Pydantic schemas for the aggregated random-user response.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any, Literal, Union

NOT_AVAILABLE = "N/A"

# A conversion rate is either a number or the literal "N/A"
Rate = Union[float, Literal["N/A"]]


class CamelModel(BaseModel):
    """Base model accepting both field names and camelCase aliases"""

    model_config = ConfigDict(populate_by_name=True)


class IdentityRecord(CamelModel):
    """Random person profile produced by the identity source"""
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    gender: str
    profile_picture: str = Field(..., alias="profilePicture")
    age: int
    date_of_birth: str = Field(..., alias="dateOfBirth")
    city: str
    country: str
    full_address: str = Field(..., alias="fullAddress")


class CountryRecord(CamelModel):
    """Country metadata looked up by the identity's country name"""
    country_name: str = Field(..., alias="countryName")
    capital: str = NOT_AVAILABLE
    languages: str = NOT_AVAILABLE
    currency: Optional[str] = None
    flag: Optional[str] = None

    @classmethod
    def degraded(cls, country_name: str) -> "CountryRecord":
        """Record used when the country lookup fails or finds nothing"""
        return cls(
            country_name=country_name,
            capital=NOT_AVAILABLE,
            languages=NOT_AVAILABLE,
            currency=None,
            flag=None
        )


class ExchangeRateRecord(CamelModel):
    """USD and KZT conversion rates for the country's currency"""
    base_currency: str = Field(..., alias="baseCurrency")
    usd: Rate = NOT_AVAILABLE
    kzt: Rate = NOT_AVAILABLE


class NewsArticleRecord(CamelModel):
    """A news headline about the identity's country"""
    title: str = "No title"
    image: Optional[str] = None
    description: str = "No description available"
    source_url: str = Field("#", alias="sourceUrl")


class AggregateResponse(CamelModel):
    """Combined response for GET /api/random-user"""
    success: bool
    user: Optional[IdentityRecord] = None
    country: Optional[CountryRecord] = None
    exchange_rates: Optional[ExchangeRateRecord] = Field(None, alias="exchangeRates")
    news: Optional[List[NewsArticleRecord]] = None
    error: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """
        Serialize to the JSON contract consumed by the browser page.

        A failed response carries only ``success`` and ``error``. A successful
        one omits ``exchangeRates`` when no rate lookup was made, while nulls
        inside the nested records are kept.

        Returns:
            JSON-ready dictionary with camelCase keys
        """
        if not self.success:
            return {"success": False, "error": self.error}

        payload = {
            "success": True,
            "user": self.user.model_dump(by_alias=True),
            "country": self.country.model_dump(by_alias=True),
            "news": [article.model_dump(by_alias=True) for article in self.news or []]
        }
        if self.exchange_rates is not None:
            payload["exchangeRates"] = self.exchange_rates.model_dump(by_alias=True)
        return payload
