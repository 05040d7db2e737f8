"""Tests for CLI helpers."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from rer_departures.adapters.config import AppConfig
from rer_departures.cli import build_parser, format_record, normalize_file, print_records
from rer_departures.domain.models import DepartureStatus, NormalizedDeparture
from tests.payloads import navitia_departures_payload


def make_record(**overrides: object) -> NormalizedDeparture:
    values: dict[str, object] = {
        "departure_time": "14:35",
        "arrival_time": "14:55",
        "departure_iso": "2024-03-15T14:35:00+01:00",
        "mission": "VICK",
        "line": "C",
        "destination": "Versailles Rive Gauche",
    }
    values.update(overrides)
    return NormalizedDeparture(**values)  # type: ignore[arg-type]


def test_format_record_shows_delay() -> None:
    """Given a delayed record, when formatting, then the delay is appended."""
    record = make_record(delay_minutes=5, status=DepartureStatus.DELAYED, has_realtime=True)

    assert format_record(record) == "14:35 -> 14:55  VICK    Versailles Rive Gauche  +5 min"


def test_format_record_without_realtime_has_no_status() -> None:
    """Given a record without realtime data, when formatting, then no status is shown."""
    record = make_record(arrival_time=None)

    assert format_record(record) == "14:35  VICK    Versailles Rive Gauche"


def test_print_records_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given records, when printing as JSON, then a JSON list is written."""
    print_records([make_record()], as_json=True)

    output = json.loads(capsys.readouterr().out)
    assert output[0]["mission"] == "VICK"
    assert output[0]["status"] == "on-time"


def test_normalize_file_reads_saved_departure_board(tmp_path: Path) -> None:
    """Given a saved departure board, when normalizing the file, then RER C trains remain."""
    path = tmp_path / "departures.json"
    path.write_text(json.dumps(navitia_departures_payload()), encoding="utf-8")
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(_env_file=None)

    result = normalize_file(str(path), config)

    assert [r.departure_time for r in result] == ["08:12", "08:30"]


def test_parser_accepts_optional_journey_stations() -> None:
    """Given no stations, when parsing 'journeys', then origin and destination default to None."""
    args = build_parser().parse_args(["journeys", "--count", "2"])

    assert args.command == "journeys"
    assert args.origin is None
    assert args.destination is None
    assert args.count == 2
