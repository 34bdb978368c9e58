"""
Random user API endpoint.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import logging

from app.core.dependencies import get_aggregator
from app.services.aggregator import Aggregator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["random-user"]
)


@router.get("/random-user")
async def get_random_user(aggregator: Aggregator = Depends(get_aggregator)):
    """
    Get a random user with country info, exchange rates and news.

    Returns:
        200 with ``{success: true, user, country, exchangeRates?, news}``, or
        500 with ``{success: false, error}`` when no identity could be fetched
    """
    result = await aggregator.handle()

    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=result.to_payload()
        )

    logger.info(
        f"Served random user from {result.country.country_name} "
        f"with {len(result.news)} news articles"
    )
    return JSONResponse(content=result.to_payload())
