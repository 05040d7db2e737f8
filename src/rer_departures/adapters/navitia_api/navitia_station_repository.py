"""Navitia station repository adapter."""

from typing import Any

from rer_departures.adapters.navitia_api.http_client import NavitiaHttpClient
from rer_departures.domain.models.station import Station
from rer_departures.domain.ports.station_repository import StationRepository


class NavitiaStationRepository(StationRepository):
    """Adapter searching stop areas through Navitia /places."""

    def __init__(self, http_client: NavitiaHttpClient) -> None:
        """Initialize with a Navitia HTTP client."""
        self._http_client = http_client

    async def search_stations(self, query: str, count: int = 8) -> list[Station]:
        """Search stop areas by name.

        Args:
            query: Free-text station name.
            count: Maximum number of places requested.

        Returns:
            Stations in upstream relevance order. Places that are not stop areas are skipped.
        """
        payload = await self._http_client.search_places(query, count=count)
        return self._parse_places(payload.get("places"))

    @staticmethod
    def _parse_places(places: Any) -> list[Station]:
        if not isinstance(places, list):
            return []

        stations = []
        for place in places:
            if not isinstance(place, dict):
                continue
            stop_area = place.get("stop_area")
            if not isinstance(stop_area, dict):
                continue
            station_id = str(stop_area.get("id", ""))
            if not station_id:
                continue
            name = stop_area.get("name") or place.get("name") or station_id
            stations.append(Station(id=station_id, name=str(name)))
        return stations
