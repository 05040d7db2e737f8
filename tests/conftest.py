"""Shared fixtures."""

import pytest

from rer_departures.domain.models import LineConfiguration


@pytest.fixture
def line_config() -> LineConfiguration:
    """Default RER C configuration in Europe/Paris."""
    return LineConfiguration()
