"""Domain models for RER departures."""

from rer_departures.domain.models.error_details import ErrorDetails
from rer_departures.domain.models.line_configuration import LineConfiguration
from rer_departures.domain.models.normalized_departure import (
    DepartureStatus,
    NormalizedDeparture,
)
from rer_departures.domain.models.raw_journey import (
    PUBLIC_TRANSPORT,
    DisplayInformations,
    RawJourney,
    RawSection,
    RawStopDateTime,
)
from rer_departures.domain.models.station import Station

__all__ = [
    "PUBLIC_TRANSPORT",
    "DepartureStatus",
    "DisplayInformations",
    "ErrorDetails",
    "LineConfiguration",
    "NormalizedDeparture",
    "RawJourney",
    "RawSection",
    "RawStopDateTime",
    "Station",
]
