"""
Base class for all upstream data sources.
"""

from abc import ABC
from typing import Dict, Any, Optional
import httpx
import logging

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Raised when an upstream source cannot produce usable data"""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class BaseSource(ABC):
    """Abstract base class for upstream API sources"""

    # Human-readable name used in logs and errors
    name = "source"

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize source with configuration.

        Args:
            config: Configuration dictionary with source-specific settings.
                Common keys are ``base_url``, ``timeout`` and ``transport``
                (an optional httpx transport, used by tests).
        """
        self.config = config
        self.base_url = config.get('base_url', '').rstrip('/')
        self.timeout = config.get('timeout', 10.0)
        self.transport = config.get('transport')

    async def _get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        allow_not_found: bool = False
    ) -> Any:
        """
        Perform a GET request and decode the JSON body.

        Args:
            path: Path appended to the source's base URL
            params: Query string parameters
            allow_not_found: Return None instead of failing on HTTP 404

        Returns:
            Decoded JSON body, or None for an allowed 404

        Raises:
            SourceError: On transport errors, timeouts, non-2xx status or invalid JSON
        """
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params)

                if allow_not_found and response.status_code == 404:
                    logger.debug(f"{self.name} returned 404 for {path}")
                    return None

                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            raise SourceError(self.name, f"HTTP {e.response.status_code} from upstream") from e
        except httpx.TimeoutException as e:
            raise SourceError(self.name, f"request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise SourceError(self.name, f"request failed: {e}") from e
        except ValueError as e:
            raise SourceError(self.name, f"invalid JSON body: {e}") from e
