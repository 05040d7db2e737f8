"""Opt-in trace of outbound Navitia calls.

Set ``RER_LOG_REQUESTS=true`` to log each request's URL and headers at INFO.
Credentials never reach the log.
"""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "RER_LOG_REQUESTS"
REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """True when RER_LOG_REQUESTS is set to 'true' (any case)."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _build_url_with_params(url: str, params: list[tuple[str, Any]] | None) -> str:
    # Navitia repeats keys such as type[], so pairs keep their order.
    if not params:
        return url
    query = "&".join(f"{key}={value}" for key, value in params)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Copy of the headers with credential values masked."""
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: list[tuple[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Trace one Navitia call when request logging is switched on.

    Args:
        method: HTTP verb.
        url: Endpoint URL without query string.
        params: Query pairs in the order they are sent.
        headers: Outgoing headers; the Authorization value is masked.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_build_url_with_params(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")

    logger.info("Navitia request:\n" + "\n".join(lines))
