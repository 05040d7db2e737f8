"""HTTP client for Navitia API requests.

API Documentation: https://doc.navitia.io/
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from rer_departures.adapters.api_request_logger import log_api_request
from rer_departures.adapters.navitia_api.constants import (
    DATA_FRESHNESS,
    DEFAULT_HEADERS,
    ERROR_BODY_MAX_CHARS,
    PLACES_RESULT_COUNT,
)
from rer_departures.adapters.navitia_api.errors import MissingCredentialsError, NavitiaApiError
from rer_departures.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NavitiaHttpClient:
    """HTTP client for one Navitia coverage region."""

    def __init__(
        self,
        session: "ClientSession",
        api_key: str | None,
        base_url: str = "https://api.navitia.io/v1",
        coverage: str = "sncf",
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp ClientSession used for all requests.
            api_key: Navitia API key. Requests fail with MissingCredentialsError when unset.
            base_url: Navitia API base URL.
            coverage: Coverage region, e.g. "sncf" or "fr-idf".
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._api_key = api_key
        self._coverage_url = f"{base_url.rstrip('/')}/coverage/{coverage}"
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _build_headers(self) -> dict[str, str]:
        if not self._api_key:
            raise MissingCredentialsError()
        return {
            **DEFAULT_HEADERS,
            "Authorization": aiohttp.BasicAuth(self._api_key).encode(),
        }

    async def _read_json(self, response: "ClientResponse", url: str) -> dict[str, Any]:
        """Return the JSON body of a successful response, raising otherwise."""
        if response.status != 200:
            error_text = await response.text(errors="replace")
            error_body = error_text[:ERROR_BODY_MAX_CHARS] or "(empty response body)"
            logger.error(f"Navitia API returned status {response.status} for {url}: {error_body}")
            raise NavitiaApiError(
                ErrorDetails(
                    status_code=response.status,
                    reason=f"Navitia API error: {response.status} {error_body}",
                )
            )

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"Navitia API returned invalid JSON for {url}: {e}")
            raise NavitiaApiError(
                ErrorDetails(status_code=response.status, reason="Invalid JSON from Navitia API")
            ) from e

        if not isinstance(data, dict):
            raise NavitiaApiError(
                ErrorDetails(status_code=response.status, reason="Unexpected Navitia response")
            )
        return data

    async def get(self, path: str, params: list[tuple[str, str | int]]) -> dict[str, Any]:
        """GET a coverage-relative path and return the decoded JSON object.

        Raises:
            MissingCredentialsError: No API key is configured.
            NavitiaApiError: Network failure, timeout, non-200 status or bad body.
        """
        headers = self._build_headers()
        url = f"{self._coverage_url}/{path.lstrip('/')}"
        log_api_request("GET", url, params=params, headers=headers)

        try:
            async with self._session.get(
                url, params=params, headers=headers, timeout=self._timeout
            ) as response:
                return await self._read_json(response, url)
        except asyncio.TimeoutError as e:
            logger.warning(f"Timeout calling Navitia API at {url}")
            raise NavitiaApiError(ErrorDetails(reason="Navitia API timed out")) from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error calling Navitia API at {url}: {e}")
            raise NavitiaApiError(ErrorDetails(reason=f"Navitia API unreachable: {e}")) from e

    async def search_places(self, query: str, count: int = PLACES_RESULT_COUNT) -> dict[str, Any]:
        """Search stop areas by name (GET /places)."""
        params: list[tuple[str, str | int]] = [
            ("q", query),
            ("type[]", "stop_area"),
            ("count", count),
        ]
        return await self.get("places", params)

    async def fetch_departures(self, stop_area_id: str, count: int = 10) -> dict[str, Any]:
        """Fetch the departure board of a stop area (GET /stop_areas/{id}/departures)."""
        params: list[tuple[str, str | int]] = [
            ("count", count),
            ("data_freshness", DATA_FRESHNESS),
        ]
        return await self.get(f"stop_areas/{stop_area_id}/departures", params)

    async def fetch_journeys(
        self, origin_id: str, destination_id: str, count: int = 6
    ) -> dict[str, Any]:
        """Fetch journeys between two places (GET /journeys)."""
        params: list[tuple[str, str | int]] = [
            ("from", origin_id),
            ("to", destination_id),
            ("count", count),
            ("data_freshness", DATA_FRESHNESS),
        ]
        return await self.get("journeys", params)
