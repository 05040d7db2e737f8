"""Tests for API request logger."""

import logging

import pytest

from rer_departures.adapters.api_request_logger import (
    _build_url_with_params,
    _redact_sensitive_headers,
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given RER_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("RER_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given RER_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("RER_LOG_REQUESTS", value)

        assert should_log_requests() is True


class TestHelpers:
    """Tests for URL building and redaction."""

    def test_repeated_keys_are_kept_in_order(self) -> None:
        """Given repeated query keys, when building the URL, then all are kept in order."""
        url = _build_url_with_params(
            "https://api.example.test/places", [("q", "Issy"), ("type[]", "stop_area")]
        )

        assert url == "https://api.example.test/places?q=Issy&type[]=stop_area"

    def test_url_with_query_string_is_extended(self) -> None:
        """Given a URL that already has a query, when building, then pairs are appended with &."""
        url = _build_url_with_params("https://api.example.test/places?depth=1", [("q", "Issy")])

        assert url == "https://api.example.test/places?depth=1&q=Issy"

    def test_authorization_is_redacted(self) -> None:
        """Given an Authorization header, when redacting, then the value is hidden."""
        headers = _redact_sensitive_headers({"Authorization": "Basic abc", "Accept": "json"})

        assert headers == {"Authorization": "***REDACTED***", "Accept": "json"}


class TestLogApiRequest:
    """Tests for log_api_request function."""

    def test_when_logging_disabled_then_does_not_log(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging disabled, when logging a request, then nothing is logged."""
        monkeypatch.delenv("RER_LOG_REQUESTS", raising=False)

        with caplog.at_level(logging.INFO):
            log_api_request("GET", "https://api.example.test/journeys")

        assert caplog.records == []

    def test_when_logging_enabled_then_logs_without_secrets(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Given logging enabled, when logging a request, then URL is logged and key is not."""
        monkeypatch.setenv("RER_LOG_REQUESTS", "true")

        with caplog.at_level(logging.INFO):
            log_api_request(
                "GET",
                "https://api.example.test/journeys",
                params=[("from", "stop_area:A")],
                headers={"Authorization": "Basic c2VjcmV0Og=="},
            )

        assert "GET https://api.example.test/journeys?from=stop_area:A" in caplog.text
        assert "c2VjcmV0Og==" not in caplog.text
        assert "***REDACTED***" in caplog.text
