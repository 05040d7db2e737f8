"""Schedule service port."""

from typing import Protocol

from rer_departures.domain.models.normalized_departure import NormalizedDeparture
from rer_departures.domain.models.station import Station


class ScheduleServicePort(Protocol):
    """Port for the schedule use cases consumed by display adapters."""

    async def search_stations(self, query: str) -> list[Station]:
        """Search stations by name."""
        ...

    async def get_departures(self, stop_area_id: str | None = None) -> list[NormalizedDeparture]:
        """Get the next departures of the configured line at a stop area."""
        ...

    async def get_journeys(
        self,
        origin_id: str | None = None,
        destination_id: str | None = None,
        count: int | None = None,
    ) -> list[NormalizedDeparture]:
        """Get journeys between two stop areas."""
        ...
