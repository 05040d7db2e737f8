"""Journey normalizer: raw upstream journeys to display-ready departures."""

import logging
from datetime import datetime

from rer_departures.application.services.compact_datetime import (
    delay_in_minutes,
    format_local_time,
    parse_compact_datetime,
)
from rer_departures.application.services.mission_code import extract_mission
from rer_departures.domain.contracts.journey_normalizer import JourneyNormalizerProtocol
from rer_departures.domain.models.line_configuration import LineConfiguration
from rer_departures.domain.models.normalized_departure import (
    DepartureStatus,
    NormalizedDeparture,
)
from rer_departures.domain.models.raw_journey import (
    PUBLIC_TRANSPORT,
    RawJourney,
    RawSection,
)

logger = logging.getLogger(__name__)


def _folded(value: str) -> str:
    return value.strip().upper()


class JourneyNormalizer(JourneyNormalizerProtocol):
    """Converts raw journeys into flat departure records for one line."""

    def __init__(self, line_config: LineConfiguration) -> None:
        """Initialize the normalizer.

        Args:
            line_config: Target line and home timezone of the transit network.
        """
        self._line_config = line_config

    def normalize(self, raw_journeys: list[RawJourney]) -> list[NormalizedDeparture]:
        """Normalize journeys, keeping input order and dropping unusable ones."""
        results: list[NormalizedDeparture] = []

        for journey in raw_journeys:
            try:
                record = self._normalize_journey(journey)
            except Exception as e:
                logger.warning(f"Error normalizing journey: {e}")
                continue
            if record is not None:
                results.append(record)

        return results

    def select_section(self, journey: RawJourney) -> RawSection | None:
        """Return the public transport leg of a journey, if any.

        Typed sections are matched on their type. Untyped sections (departure
        boards) are matched on the configured line code and network.
        """
        for section in journey.sections:
            if section.type == PUBLIC_TRANSPORT:
                return section
            if section.type is None and self._matches_line(section):
                return section
        return None

    def _matches_line(self, section: RawSection) -> bool:
        info = section.display_informations
        if info is None:
            return False
        if _folded(info.code) != _folded(self._line_config.line_code):
            return False
        if info.network and _folded(info.network) != _folded(self._line_config.network):
            return False
        return True

    def _parse(self, value: str | None) -> datetime | None:
        return parse_compact_datetime(value, self._line_config.timezone)

    def _departure_times(
        self, journey: RawJourney, section: RawSection
    ) -> tuple[datetime | None, datetime | None]:
        """Returns (actual, scheduled) departure for the boarding stop."""
        first_stop = section.stop_date_times[0] if section.stop_date_times else None

        actual = self._parse(first_stop.departure_date_time) if first_stop else None
        if actual is None:
            actual = self._parse(section.departure_date_time)
        if actual is None:
            actual = self._parse(journey.departure_date_time)

        scheduled = self._parse(first_stop.base_departure_date_time) if first_stop else None
        if scheduled is None:
            scheduled = self._parse(section.base_departure_date_time)

        return actual, scheduled

    def _arrival_times(
        self, journey: RawJourney, section: RawSection
    ) -> tuple[datetime | None, datetime | None]:
        """Returns (actual, scheduled) arrival for the alighting stop."""
        last_stop = section.stop_date_times[-1] if section.stop_date_times else None

        actual = self._parse(last_stop.arrival_date_time) if last_stop else None
        if actual is None:
            actual = self._parse(section.arrival_date_time)
        if actual is None:
            actual = self._parse(journey.arrival_date_time)

        scheduled = self._parse(last_stop.base_arrival_date_time) if last_stop else None
        if scheduled is None:
            scheduled = self._parse(section.base_arrival_date_time)

        return actual, scheduled

    def _normalize_journey(self, journey: RawJourney) -> NormalizedDeparture | None:
        section = self.select_section(journey)
        if section is None or section.display_informations is None:
            return None
        info = section.display_informations

        departure, scheduled_departure = self._departure_times(journey, section)
        if departure is None:
            logger.debug("Dropping journey without a usable departure time")
            return None
        arrival, scheduled_arrival = self._arrival_times(journey, section)

        departure_delay = delay_in_minutes(departure, scheduled_departure)
        arrival_delay = delay_in_minutes(arrival, scheduled_arrival)
        delay_minutes = departure_delay or 0

        timezone_name = self._line_config.timezone
        return NormalizedDeparture(
            departure_time=format_local_time(departure, timezone_name),
            arrival_time=format_local_time(arrival, timezone_name) if arrival else None,
            departure_iso=departure.isoformat(),
            arrival_iso=arrival.isoformat() if arrival else None,
            mission=extract_mission(
                info, self._line_config.line_code, self._line_config.mission_placeholder
            ),
            line=info.label or info.code or self._line_config.line_code,
            destination=info.direction or info.headsign,
            delay_minutes=delay_minutes,
            arrival_delay_minutes=arrival_delay or 0,
            duration_seconds=journey.duration_s,
            status=DepartureStatus.DELAYED if delay_minutes > 0 else DepartureStatus.ON_TIME,
            has_realtime=departure_delay is not None,
        )
