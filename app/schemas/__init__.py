"""
Pydantic schemas for the Random Profile Aggregator
"""
from app.schemas.aggregate import (
    NOT_AVAILABLE, IdentityRecord, CountryRecord, ExchangeRateRecord,
    NewsArticleRecord, AggregateResponse
)

__all__ = [
    "NOT_AVAILABLE", "IdentityRecord", "CountryRecord", "ExchangeRateRecord",
    "NewsArticleRecord", "AggregateResponse"
]
