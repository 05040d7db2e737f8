"""Navitia API adapters."""

from rer_departures.adapters.navitia_api.errors import MissingCredentialsError, NavitiaApiError
from rer_departures.adapters.navitia_api.http_client import NavitiaHttpClient
from rer_departures.adapters.navitia_api.navitia_journey_repository import (
    NavitiaJourneyRepository,
)
from rer_departures.adapters.navitia_api.navitia_station_repository import (
    NavitiaStationRepository,
)
from rer_departures.adapters.navitia_api.payload_adapters import PayloadVariant, adapt_payload

__all__ = [
    "MissingCredentialsError",
    "NavitiaApiError",
    "NavitiaHttpClient",
    "NavitiaJourneyRepository",
    "NavitiaStationRepository",
    "PayloadVariant",
    "adapt_payload",
]
