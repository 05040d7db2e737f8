"""Per-client throttling of the schedule API, backed by throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

# Only these routes reach Navitia; the page, assets and /healthz are free.
THROTTLED_PREFIX = "/api/"
DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Return the originating client address.

    Behind a reverse proxy the first X-Forwarded-For entry is the browser;
    otherwise the socket peer is used.
    """
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    first_hop = forwarded_for.split(",")[0].strip()
    if first_hop:
        return first_hop

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def is_throttled_path(path: str) -> bool:
    """Whether a request path counts against the per-client quota."""
    return path.startswith(THROTTLED_PREFIX)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token bucket per client IP on the /api/ routes.

    Every open page polls the schedule endpoints and each poll spends
    Navitia quota, so one client cannot drain it for everyone.
    """

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self._quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self._store = store.MemoryStore()
        logger.info(f"API throttling: {requests_per_minute} requests per minute per client")

    def _limiter_for(self, client_ip: str) -> Throttled:
        """Build a limiter for one request; bucket state lives in the shared store."""
        return Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self._quota,
            store=self._store,
        )

    @staticmethod
    def _extract_retry_after(result: Any) -> float:
        """Seconds to wait, read from a throttled-py result (state first, then result)."""
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None)
        if retry_after is None:
            retry_after = getattr(result, "retry_after", None)
        return float(retry_after) if retry_after else DEFAULT_RETRY_AFTER_SECONDS

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if not is_throttled_path(request.url.path):
            return await call_next(request)

        client_ip = extract_client_ip(request)
        result = self._limiter_for(client_ip).limit()
        if not result.limited:
            return await call_next(request)

        retry_after = self._extract_retry_after(result)
        logger.warning(
            f"Throttled {client_ip} on {request.url.path}, retry after {retry_after:.0f}s"
        )
        return JSONResponse(
            {"error": "Too many requests, try again later"},
            status_code=429,
            headers={"Retry-After": str(max(1, int(retry_after)))},
        )
