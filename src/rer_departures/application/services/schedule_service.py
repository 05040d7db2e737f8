"""Schedule use cases: station search, departure board and journeys."""

import logging

from rer_departures.domain.contracts.journey_normalizer import JourneyNormalizerProtocol
from rer_departures.domain.models.line_configuration import LineConfiguration
from rer_departures.domain.models.normalized_departure import NormalizedDeparture
from rer_departures.domain.models.station import Station
from rer_departures.domain.ports.journey_repository import JourneyRepository
from rer_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2


class ScheduleService:
    """Service combining the transit repositories with the journey normalizer."""

    def __init__(
        self,
        journey_repository: JourneyRepository,
        station_repository: StationRepository,
        normalizer: JourneyNormalizerProtocol,
        line_config: LineConfiguration,
    ) -> None:
        """Initialize with repositories, a normalizer and the line configuration."""
        self._journey_repository = journey_repository
        self._station_repository = station_repository
        self._normalizer = normalizer
        self._line_config = line_config

    async def search_stations(self, query: str) -> list[Station]:
        """Search stations by name. Queries shorter than two characters yield nothing."""
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []
        return await self._station_repository.search_stations(query)

    async def get_departures(self, stop_area_id: str | None = None) -> list[NormalizedDeparture]:
        """Get the next departures of the configured line at a stop area.

        The upstream board lists every line at the stop, so more entries are
        requested than are finally shown.
        """
        stop_area_id = stop_area_id or self._line_config.default_origin_id
        max_results = self._line_config.max_results
        raw = await self._journey_repository.get_departures(stop_area_id, count=max_results * 3)
        departures = self._normalizer.normalize(raw)
        logger.debug(
            f"Normalized {len(departures)} of {len(raw)} departures for {stop_area_id}"
        )
        return departures[:max_results]

    async def get_journeys(
        self,
        origin_id: str | None = None,
        destination_id: str | None = None,
        count: int | None = None,
    ) -> list[NormalizedDeparture]:
        """Get journeys between two stop areas, defaulting to the configured pair."""
        origin_id = origin_id or self._line_config.default_origin_id
        destination_id = destination_id or self._line_config.default_destination_id
        count = count or self._line_config.max_results
        raw = await self._journey_repository.get_journeys(origin_id, destination_id, count=count)
        journeys = self._normalizer.normalize(raw)
        logger.debug(
            f"Normalized {len(journeys)} of {len(raw)} journeys "
            f"from {origin_id} to {destination_id}"
        )
        return journeys[:count]
