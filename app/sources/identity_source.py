"""
Identity source backed by the randomuser.me API.
"""

from typing import Dict, Any
from datetime import datetime
import logging

from app.sources.base_source import BaseSource, SourceError
from app.schemas.aggregate import IdentityRecord

logger = logging.getLogger(__name__)


def format_date_of_birth(value: str) -> str:
    """
    Render an ISO timestamp as a short US-style date.

    Args:
        value: ISO 8601 timestamp, e.g. "1985-03-07T10:21:13.000Z"

    Returns:
        Date string such as "3/7/1985"
    """
    born = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{born.month}/{born.day}/{born.year}"


def parse_identity(data: Dict[str, Any]) -> IdentityRecord:
    """
    Convert a randomuser.me response into an IdentityRecord.

    Args:
        data: Decoded response body

    Returns:
        IdentityRecord for the first returned person

    Raises:
        SourceError: If the body has no results or required fields are missing
    """
    try:
        person = data["results"][0]
        location = person["location"]
        street = location["street"]

        return IdentityRecord(
            first_name=person["name"]["first"],
            last_name=person["name"]["last"],
            gender=person["gender"],
            profile_picture=person["picture"]["large"],
            age=person["dob"]["age"],
            date_of_birth=format_date_of_birth(person["dob"]["date"]),
            city=location["city"],
            country=location["country"],
            full_address=f"{street['number']} {street['name']}"
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise SourceError(IdentitySource.name, f"malformed response: {e!r}") from e


class IdentitySource(BaseSource):
    """Fetch one synthetic random person"""

    name = "randomuser"

    async def fetch_identity(self) -> IdentityRecord:
        """
        Request exactly one random identity.

        Returns:
            IdentityRecord

        Raises:
            SourceError: If the request fails or the body is malformed
        """
        data = await self._get_json("/api/", params={"results": 1})
        identity = parse_identity(data)
        logger.info(
            f"Fetched identity {identity.first_name} {identity.last_name} "
            f"from {identity.country}"
        )
        return identity
