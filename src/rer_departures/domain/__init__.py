"""Domain layer - core business logic and models."""

from rer_departures.domain.models import (
    LineConfiguration,
    NormalizedDeparture,
    RawJourney,
    Station,
)
from rer_departures.domain.ports import (
    JourneyRepository,
    StationRepository,
)

__all__ = [
    "JourneyRepository",
    "LineConfiguration",
    "NormalizedDeparture",
    "RawJourney",
    "Station",
    "StationRepository",
]
