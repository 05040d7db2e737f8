"""Wiring of adapters and application services."""

import aiohttp

from rer_departures.adapters.config import AppConfig
from rer_departures.adapters.navitia_api import (
    NavitiaHttpClient,
    NavitiaJourneyRepository,
    NavitiaStationRepository,
)
from rer_departures.application.services import JourneyNormalizer, ScheduleService


def build_schedule_service(
    config: AppConfig, session: aiohttp.ClientSession
) -> ScheduleService:
    """Wire the Navitia adapters and the normalizer into the schedule service."""
    line_config = config.to_line_configuration()
    http_client = NavitiaHttpClient(
        session=session,
        api_key=config.navitia_api_key,
        base_url=config.navitia_base_url,
        coverage=config.navitia_coverage,
        timeout_seconds=config.request_timeout_seconds,
    )
    return ScheduleService(
        journey_repository=NavitiaJourneyRepository(http_client),
        station_repository=NavitiaStationRepository(http_client),
        normalizer=JourneyNormalizer(line_config),
        line_config=line_config,
    )
