"""Application services (use cases)."""

from rer_departures.application.services.journey_normalizer import JourneyNormalizer
from rer_departures.application.services.schedule_service import ScheduleService

__all__ = ["JourneyNormalizer", "ScheduleService"]
