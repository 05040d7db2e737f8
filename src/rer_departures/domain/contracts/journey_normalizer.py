"""Protocol for normalizing raw journeys."""

from typing import Protocol

from rer_departures.domain.models.normalized_departure import NormalizedDeparture
from rer_departures.domain.models.raw_journey import RawJourney


class JourneyNormalizerProtocol(Protocol):
    """Protocol for turning raw upstream journeys into display-ready records."""

    def normalize(self, raw_journeys: list[RawJourney]) -> list[NormalizedDeparture]:
        """Normalize journeys.

        Args:
            raw_journeys: Journeys in the canonical upstream shape.

        Returns:
            One record per qualifying journey, in input order. Journeys without a
            usable public transport section are left out.
        """
        ...
