"""Static assets for the schedule page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
CACHE_CONTROL = "public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(header[0].lower() == b"cache-control" for header in headers):
                    headers.append((b"cache-control", CACHE_CONTROL.encode()))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


async def serve_index(_request: Any) -> Response:
    """Serve the schedule page."""
    index_path = STATIC_DIR / "index.html"
    if not index_path.exists():
        logger.error(f"Could not find index page at {index_path}")
        return Response(content="Page not found", media_type="text/plain", status_code=404)
    response = FileResponse(str(index_path), media_type="text/html")
    response.headers["Cache-Control"] = CACHE_CONTROL
    return response


def static_routes(static_dir: Path = STATIC_DIR) -> list[Route | Mount]:
    """Routes serving the page at "/" and its assets under "/static"."""
    routes: list[Route | Mount] = [Route("/", serve_index, methods=["GET"])]
    if static_dir.exists():
        static_files = StaticFiles(directory=str(static_dir))
        routes.append(Mount("/static", app=StaticFileCacheApp(static_files), name="static"))
        logger.info(f"Mounted static files from {static_dir} with 1-minute cache headers")
    else:
        logger.warning(f"Static directory not found at {static_dir}")
    return routes
