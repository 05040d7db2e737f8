"""Adapters from the Navitia response shapes to canonical raw journeys.

Navitia answers journey searches with journeys made of typed sections, and
departure boards with one stop time per entry. Each shape gets its own
adapter so the normalizer only ever sees ``RawJourney``.
"""

import logging
from enum import Enum
from typing import Any

from rer_departures.domain.models.raw_journey import (
    DisplayInformations,
    RawJourney,
    RawSection,
    RawStopDateTime,
)

logger = logging.getLogger(__name__)


class PayloadVariant(Enum):
    """Known upstream payload shapes."""

    JOURNEYS = "journeys"
    DEPARTURES = "departures"


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) and value else None


def _text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def parse_display_informations(data: Any) -> DisplayInformations | None:
    """Parse a display_informations object; None when absent."""
    if not isinstance(data, dict):
        return None
    return DisplayInformations(
        headsign=_text(data, "headsign"),
        label=_text(data, "label"),
        code=_text(data, "code"),
        trip_short_name=_text(data, "trip_short_name"),
        direction=_text(data, "direction"),
        network=_text(data, "network"),
        commercial_mode=_text(data, "commercial_mode"),
    )


def parse_stop_date_time(data: Any) -> RawStopDateTime:
    """Parse one stop_date_time object."""
    data = _as_dict(data)
    return RawStopDateTime(
        departure_date_time=_optional_str(data, "departure_date_time"),
        arrival_date_time=_optional_str(data, "arrival_date_time"),
        base_departure_date_time=_optional_str(data, "base_departure_date_time"),
        base_arrival_date_time=_optional_str(data, "base_arrival_date_time"),
    )


def _parse_duration(value: Any) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0


class JourneysPayloadAdapter:
    """Converts a /journeys response (section per leg)."""

    variant = PayloadVariant.JOURNEYS

    @staticmethod
    def parse_section(data: dict[str, Any]) -> RawSection:
        """Parse one journey section."""
        section_type = data.get("type")
        return RawSection(
            type=section_type if isinstance(section_type, str) else None,
            display_informations=parse_display_informations(data.get("display_informations")),
            stop_date_times=tuple(
                parse_stop_date_time(sdt) for sdt in _as_list(data.get("stop_date_times"))
            ),
            departure_date_time=_optional_str(data, "departure_date_time"),
            arrival_date_time=_optional_str(data, "arrival_date_time"),
            base_departure_date_time=_optional_str(data, "base_departure_date_time"),
            base_arrival_date_time=_optional_str(data, "base_arrival_date_time"),
        )

    @classmethod
    def adapt(cls, payload: dict[str, Any]) -> list[RawJourney]:
        """Convert every journey object of the payload."""
        journeys = []
        for journey in _as_list(payload.get("journeys")):
            if not isinstance(journey, dict):
                continue
            sections = tuple(
                cls.parse_section(section)
                for section in _as_list(journey.get("sections"))
                if isinstance(section, dict)
            )
            journeys.append(
                RawJourney(
                    sections=sections,
                    departure_date_time=_optional_str(journey, "departure_date_time"),
                    arrival_date_time=_optional_str(journey, "arrival_date_time"),
                    duration_s=_parse_duration(journey.get("duration")),
                )
            )
        return journeys


class DeparturesPayloadAdapter:
    """Converts a /departures response (one stop time per entry)."""

    variant = PayloadVariant.DEPARTURES

    @staticmethod
    def adapt(payload: dict[str, Any]) -> list[RawJourney]:
        """Convert every departure into a single, untyped section journey."""
        journeys = []
        for departure in _as_list(payload.get("departures")):
            if not isinstance(departure, dict):
                continue
            stop_date_time = parse_stop_date_time(departure.get("stop_date_time"))
            section = RawSection(
                type=None,
                display_informations=parse_display_informations(
                    departure.get("display_informations")
                ),
                stop_date_times=(stop_date_time,),
            )
            journeys.append(
                RawJourney(
                    sections=(section,),
                    departure_date_time=stop_date_time.departure_date_time,
                    arrival_date_time=stop_date_time.arrival_date_time,
                )
            )
        return journeys


ADAPTERS = {
    PayloadVariant.JOURNEYS: JourneysPayloadAdapter,
    PayloadVariant.DEPARTURES: DeparturesPayloadAdapter,
}


def detect_variant(payload: Any) -> PayloadVariant | None:
    """Tell which shape a payload has, or None if it has neither."""
    if not isinstance(payload, dict):
        return None
    for variant in PayloadVariant:
        if isinstance(payload.get(variant.value), list):
            return variant
    return None


def adapt_payload(payload: Any) -> list[RawJourney]:
    """Convert any known payload shape to canonical raw journeys."""
    variant = detect_variant(payload)
    if variant is None:
        logger.debug("Payload has neither journeys nor departures")
        return []
    return ADAPTERS[variant].adapt(payload)
