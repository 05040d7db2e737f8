"""Journey repository port."""

from typing import Protocol

from rer_departures.domain.models.raw_journey import RawJourney


class JourneyRepository(Protocol):
    """Port for retrieving raw journeys and departures from the transit API."""

    async def get_departures(self, stop_area_id: str, count: int = 10) -> list[RawJourney]:
        """Get the next departures at a stop area, as single-section journeys."""
        ...

    async def get_journeys(
        self, origin_id: str, destination_id: str, count: int = 6
    ) -> list[RawJourney]:
        """Get journeys between two stop areas."""
        ...
