"""Ports (interfaces) for the ports-and-adapters architecture."""

from rer_departures.domain.ports.journey_repository import JourneyRepository
from rer_departures.domain.ports.schedule_service import ScheduleServicePort
from rer_departures.domain.ports.station_repository import StationRepository

__all__ = [
    "JourneyRepository",
    "ScheduleServicePort",
    "StationRepository",
]
