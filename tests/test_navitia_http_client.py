"""Tests for the Navitia HTTP client."""

import asyncio
from typing import Any
from unittest.mock import MagicMock

import aiohttp
import pytest

from rer_departures.adapters.navitia_api import (
    MissingCredentialsError,
    NavitiaApiError,
    NavitiaHttpClient,
)


class FakeResponse:
    """Minimal stand-in for aiohttp's response context manager."""

    def __init__(
        self, status: int = 200, body: Any = None, text: str = "", raw: bytes | None = None
    ) -> None:
        self.status = status
        self._body = body
        self._text = text
        self._raw = raw

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *_args: object) -> None:
        return None

    async def text(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        if self._raw is not None:
            return self._raw.decode(encoding, errors)
        return self._text

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


def make_client(response: Any = None, api_key: str | None = "secret") -> tuple[Any, MagicMock]:
    session = MagicMock()
    if isinstance(response, BaseException):
        session.get = MagicMock(side_effect=response)
    else:
        session.get = MagicMock(return_value=response)
    client = NavitiaHttpClient(
        session=session,
        api_key=api_key,
        base_url="https://api.example.test/v1/",
        coverage="sncf",
        timeout_seconds=5,
    )
    return client, session


class TestRequests:
    """Tests for request construction."""

    @pytest.mark.asyncio
    async def test_search_places_sends_basic_auth_and_stop_area_filter(self) -> None:
        """Given a query, when searching places, then the coverage URL and filters are used."""
        client, session = make_client(FakeResponse(body={"places": []}))

        result = await client.search_places("Versailles")

        assert result == {"places": []}
        args, kwargs = session.get.call_args
        assert args[0] == "https://api.example.test/v1/coverage/sncf/places"
        assert ("type[]", "stop_area") in kwargs["params"]
        assert ("q", "Versailles") in kwargs["params"]
        assert kwargs["headers"]["Authorization"] == aiohttp.BasicAuth("secret").encode()
        assert kwargs["headers"]["Authorization"].startswith("Basic ")

    @pytest.mark.asyncio
    async def test_fetch_departures_requests_realtime(self) -> None:
        """Given a stop area, when fetching departures, then realtime data is requested."""
        client, session = make_client(FakeResponse(body={"departures": []}))

        await client.fetch_departures("stop_area:SNCF:87758011", count=18)

        args, kwargs = session.get.call_args
        assert args[0].endswith("/stop_areas/stop_area:SNCF:87758011/departures")
        assert ("count", 18) in kwargs["params"]
        assert ("data_freshness", "realtime") in kwargs["params"]

    @pytest.mark.asyncio
    async def test_fetch_journeys_passes_from_and_to(self) -> None:
        """Given two stop areas, when fetching journeys, then both are sent."""
        client, session = make_client(FakeResponse(body={"journeys": []}))

        await client.fetch_journeys("stop_area:A", "stop_area:B", count=4)

        args, kwargs = session.get.call_args
        assert args[0].endswith("/coverage/sncf/journeys")
        assert ("from", "stop_area:A") in kwargs["params"]
        assert ("to", "stop_area:B") in kwargs["params"]
        assert ("count", 4) in kwargs["params"]


class TestFailures:
    """Tests for the error channel."""

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_before_any_request(self) -> None:
        """Given no API key, when requesting, then MissingCredentialsError is raised."""
        client, session = make_client(FakeResponse(body={}), api_key=None)

        with pytest.raises(MissingCredentialsError):
            await client.search_places("Versailles")
        session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_200_status_raises_with_status_code(self) -> None:
        """Given a 401 answer, when requesting, then NavitiaApiError carries the status."""
        client, _ = make_client(FakeResponse(status=401, text='{"message": "no token"}'))

        with pytest.raises(NavitiaApiError) as exc_info:
            await client.fetch_journeys("a", "b")

        assert exc_info.value.details.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self) -> None:
        """Given an unparsable body, when requesting, then NavitiaApiError is raised."""
        client, _ = make_client(FakeResponse(body=ValueError("bad json")))

        with pytest.raises(NavitiaApiError, match="Invalid JSON"):
            await client.fetch_departures("x")

    @pytest.mark.asyncio
    async def test_non_object_body_raises(self) -> None:
        """Given a JSON list, when requesting, then NavitiaApiError is raised."""
        client, _ = make_client(FakeResponse(body=[1, 2]))

        with pytest.raises(NavitiaApiError):
            await client.fetch_departures("x")

    @pytest.mark.asyncio
    async def test_connection_error_raises(self) -> None:
        """Given a connection failure, when requesting, then NavitiaApiError is raised."""
        client, _ = make_client(aiohttp.ClientConnectionError("refused"))

        with pytest.raises(NavitiaApiError, match="unreachable"):
            await client.search_places("x")

    @pytest.mark.asyncio
    async def test_timeout_raises(self) -> None:
        """Given a timeout, when requesting, then NavitiaApiError is raised."""
        client, _ = make_client(asyncio.TimeoutError())

        with pytest.raises(NavitiaApiError, match="timed out"):
            await client.search_places("x")

    @pytest.mark.asyncio
    async def test_undecodable_error_body_still_raises_api_error(self) -> None:
        """Given a 503 whose body is not UTF-8, when requesting, then NavitiaApiError is raised."""
        client, _ = make_client(FakeResponse(status=503, raw=b"\xff\xfe\xfa oops"))

        with pytest.raises(NavitiaApiError) as exc_info:
            await client.fetch_journeys("a", "b")

        assert exc_info.value.details.status_code == 503
        assert "oops" in exc_info.value.details.reason
