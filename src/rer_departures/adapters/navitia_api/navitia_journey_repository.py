"""Navitia journey repository adapter."""

import logging

from rer_departures.adapters.navitia_api.http_client import NavitiaHttpClient
from rer_departures.adapters.navitia_api.payload_adapters import (
    DeparturesPayloadAdapter,
    JourneysPayloadAdapter,
)
from rer_departures.domain.models.raw_journey import RawJourney
from rer_departures.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


class NavitiaJourneyRepository(JourneyRepository):
    """Adapter fetching departures and journeys from Navitia."""

    def __init__(self, http_client: NavitiaHttpClient) -> None:
        """Initialize with a Navitia HTTP client."""
        self._http_client = http_client

    async def get_departures(self, stop_area_id: str, count: int = 10) -> list[RawJourney]:
        """Get the departure board of a stop area as single-section journeys."""
        payload = await self._http_client.fetch_departures(stop_area_id, count=count)
        departures = DeparturesPayloadAdapter.adapt(payload)
        if not departures:
            logger.debug(f"No departures returned for stop area {stop_area_id}")
        return departures

    async def get_journeys(
        self, origin_id: str, destination_id: str, count: int = 6
    ) -> list[RawJourney]:
        """Get journeys between two stop areas."""
        payload = await self._http_client.fetch_journeys(origin_id, destination_id, count=count)
        journeys = JourneysPayloadAdapter.adapt(payload)
        if not journeys:
            logger.debug(f"No journeys returned from {origin_id} to {destination_id}")
        return journeys
