"""Tests for the Navitia payload adapters."""

from rer_departures.adapters.navitia_api.payload_adapters import (
    DeparturesPayloadAdapter,
    JourneysPayloadAdapter,
    PayloadVariant,
    adapt_payload,
    detect_variant,
)
from rer_departures.application.services import JourneyNormalizer
from rer_departures.domain.models import LineConfiguration
from tests.payloads import navitia_departures_payload, navitia_journey_payload


class TestVariantDetection:
    """Tests for detecting the payload shape."""

    def test_journeys_payload(self) -> None:
        """Given a body with journeys, when detecting, then JOURNEYS is returned."""
        assert detect_variant(navitia_journey_payload()) is PayloadVariant.JOURNEYS

    def test_departures_payload(self) -> None:
        """Given a body with departures, when detecting, then DEPARTURES is returned."""
        assert detect_variant(navitia_departures_payload()) is PayloadVariant.DEPARTURES

    def test_unknown_payload(self) -> None:
        """Given an error body or a list, when detecting, then None is returned."""
        assert detect_variant({"error": {"id": "no_solution"}}) is None
        assert detect_variant([]) is None
        assert adapt_payload({"journeys": None}) == []


class TestJourneysPayloadAdapter:
    """Tests for the section-per-leg shape."""

    def test_copies_sections_and_journey_fields(self) -> None:
        """Given a journeys body, when adapting, then sections and timings are kept."""
        journeys = JourneysPayloadAdapter.adapt(navitia_journey_payload())

        assert len(journeys) == 1
        journey = journeys[0]
        assert journey.duration_s == 1500
        assert journey.departure_date_time == "20240315T143000"
        assert [s.type for s in journey.sections] == ["street_network", "public_transport"]
        ride = journey.sections[1]
        assert ride.display_informations is not None
        assert ride.display_informations.trip_short_name == "VICK"
        assert ride.stop_date_times[0].base_departure_date_time == "20240315T143000"
        assert ride.base_arrival_date_time == "20240315T145000"

    def test_tolerates_missing_and_malformed_fields(self) -> None:
        """Given sparse journeys, when adapting, then absent data becomes empty values."""
        payload = {
            "journeys": [
                "not a journey",
                {"sections": [{"type": "public_transport", "stop_date_times": "oops"}, 3]},
                {"duration": "abc"},
            ]
        }

        journeys = JourneysPayloadAdapter.adapt(payload)

        assert len(journeys) == 2
        assert journeys[0].sections[0].display_informations is None
        assert journeys[0].sections[0].stop_date_times == ()
        assert journeys[1].sections == ()
        assert journeys[1].duration_s == 0

    def test_null_display_fields_become_empty_strings(self) -> None:
        """Given null metadata values, when adapting, then they read as empty strings."""
        payload = navitia_journey_payload(
            display_informations={"headsign": None, "code": "C", "trip_short_name": None}
        )

        ride = JourneysPayloadAdapter.adapt(payload)[0].sections[1]

        assert ride.display_informations is not None
        assert ride.display_informations.headsign == ""
        assert ride.display_informations.trip_short_name == ""


class TestDeparturesPayloadAdapter:
    """Tests for the departure board shape."""

    def test_each_departure_becomes_one_untyped_section(self) -> None:
        """Given a departure board, when adapting, then each entry is a single-section journey."""
        journeys = DeparturesPayloadAdapter.adapt(navitia_departures_payload())

        assert len(journeys) == 4
        assert all(len(j.sections) == 1 for j in journeys)
        assert all(j.sections[0].type is None for j in journeys)
        assert journeys[0].departure_date_time == "20240715T081200"
        assert journeys[0].sections[0].stop_date_times[0].base_departure_date_time == (
            "20240715T081000"
        )

    def test_board_normalizes_to_configured_line_only(self) -> None:
        """Given a mixed board, when adapting and normalizing, then only RER C remains."""
        normalizer = JourneyNormalizer(LineConfiguration())

        result = normalizer.normalize(adapt_payload(navitia_departures_payload()))

        assert [r.departure_time for r in result] == ["08:12", "08:30"]
        assert result[0].delay_minutes == 2
        assert result[0].mission == "VERO"
        assert result[0].departure_iso == "2024-07-15T08:12:00+02:00"
        assert result[1].has_realtime is False


def test_journey_payload_end_to_end() -> None:
    """Given a journeys body, when adapting and normalizing, then a delayed record results."""
    result = JourneyNormalizer(LineConfiguration()).normalize(
        adapt_payload(navitia_journey_payload())
    )

    assert len(result) == 1
    record = result[0]
    assert record.departure_time == "14:35"
    assert record.arrival_time == "14:55"
    assert record.delay_minutes == 5
    assert record.arrival_delay_minutes == 5
    assert record.mission == "VICK"
    assert record.duration_seconds == 1500
