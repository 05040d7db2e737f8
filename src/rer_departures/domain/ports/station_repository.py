"""Station repository port."""

from typing import Protocol

from rer_departures.domain.models.station import Station


class StationRepository(Protocol):
    """Port for searching stations."""

    async def search_stations(self, query: str, count: int = 8) -> list[Station]:
        """Search stop areas by free-text name."""
        ...
