"""Starlette web adapter exposing the schedule API and page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from rer_departures.adapters.config import AppConfig
from rer_departures.adapters.navitia_api.errors import MissingCredentialsError, NavitiaApiError
from rer_departures.adapters.web.rate_limit_middleware import RateLimitMiddleware
from rer_departures.adapters.web.static_files import static_routes

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from rer_departures.domain.models import NormalizedDeparture
    from rer_departures.domain.ports import ScheduleServicePort

logger = logging.getLogger(__name__)

MAX_JOURNEY_COUNT = 20


def _serialize(records: list[NormalizedDeparture]) -> list[dict[str, Any]]:
    return [record.model_dump(mode="json") for record in records]


def upstream_errors(
    handler: Callable[[Request], Awaitable[Response]],
) -> Callable[[Request], Awaitable[Response]]:
    """Map upstream failures to an error channel distinct from empty results.

    Missing credentials answer 503, upstream failures 502.
    """

    async def wrapper(request: Request) -> Response:
        try:
            return await handler(request)
        except MissingCredentialsError as e:
            logger.error("Navitia API key not found")
            return JSONResponse({"error": str(e)}, status_code=503)
        except NavitiaApiError as e:
            logger.error(f"Error calling Navitia for {request.url.path}: {e}")
            return JSONResponse({"error": "Navitia API unavailable"}, status_code=502)

    return wrapper


class ScheduleEndpoints:
    """HTTP handlers for stations, departures and journeys."""

    def __init__(self, schedule_service: ScheduleServicePort) -> None:
        """Initialize with the schedule service."""
        self._schedule_service = schedule_service

    async def stations(self, request: Request) -> Response:
        """GET /api/stations?q= - station autocomplete."""
        query = request.query_params.get("q", "")
        stations = await self._schedule_service.search_stations(query)
        return JSONResponse(
            {"stations": [{"id": station.id, "name": station.name} for station in stations]}
        )

    async def trains(self, request: Request) -> Response:
        """GET /api/trains?stop_area= - next departures of the configured line."""
        stop_area_id = request.query_params.get("stop_area") or None
        departures = await self._schedule_service.get_departures(stop_area_id)
        return JSONResponse({"departures": _serialize(departures)})

    async def journeys(self, request: Request) -> Response:
        """GET /api/journeys?from=&to=&count= - journeys between two stop areas."""
        count: int | None = None
        raw_count = request.query_params.get("count")
        if raw_count:
            try:
                count = int(raw_count)
            except ValueError:
                return JSONResponse({"error": "count must be an integer"}, status_code=400)
            if not 1 <= count <= MAX_JOURNEY_COUNT:
                return JSONResponse(
                    {"error": f"count must be between 1 and {MAX_JOURNEY_COUNT}"},
                    status_code=400,
                )

        journeys = await self._schedule_service.get_journeys(
            origin_id=request.query_params.get("from") or None,
            destination_id=request.query_params.get("to") or None,
            count=count,
        )
        return JSONResponse({"journeys": _serialize(journeys)})

    def routes(self) -> list[Route]:
        """API routes served by this adapter."""
        return [
            Route("/api/stations", upstream_errors(self.stations), methods=["GET"]),
            Route("/api/trains", upstream_errors(self.trains), methods=["GET"]),
            Route("/api/journeys", upstream_errors(self.journeys), methods=["GET"]),
        ]


async def healthz(_request: Request) -> Response:
    """Health check endpoint for load balancers and monitoring."""
    return Response(content="Ok", media_type="text/plain")


def create_app(schedule_service: ScheduleServicePort, config: AppConfig) -> Starlette:
    """Build the Starlette application.

    Args:
        schedule_service: Use cases behind the API routes.
        config: Application configuration.

    Returns:
        Application with the API, health check, page and rate limiting.
    """
    if not isinstance(config, AppConfig):
        raise TypeError("config must be an AppConfig instance")

    endpoints = ScheduleEndpoints(schedule_service)
    routes = [
        *endpoints.routes(),
        Route("/healthz", healthz, methods=["GET"]),
        *static_routes(),
    ]
    app = Starlette(routes=routes)
    app.add_middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
    return app


class WebServer:
    """Runs the Starlette application with uvicorn."""

    def __init__(self, schedule_service: ScheduleServicePort, config: AppConfig) -> None:
        """Initialize the web server.

        Args:
            schedule_service: Use cases behind the API routes.
            config: Application configuration (host, port, rate limit).
        """
        self.config = config
        self.app = create_app(schedule_service, config)
        self._server: Any | None = None

    async def start(self) -> None:
        """Start serving until stopped."""
        import uvicorn

        server_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the server to exit."""
        if self._server:
            self._server.should_exit = True
