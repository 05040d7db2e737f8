"""Canonical upstream journey shapes consumed by the normalizer."""

from dataclasses import dataclass, field

PUBLIC_TRANSPORT = "public_transport"


@dataclass(frozen=True)
class DisplayInformations:
    """Display metadata of a public transport leg."""

    headsign: str = ""
    label: str = ""
    code: str = ""
    trip_short_name: str = ""
    direction: str = ""
    network: str = ""
    commercial_mode: str = ""


@dataclass(frozen=True)
class RawStopDateTime:
    """Timing at one stop. Base times are absent when no realtime data exists."""

    departure_date_time: str | None = None
    arrival_date_time: str | None = None
    base_departure_date_time: str | None = None
    base_arrival_date_time: str | None = None


@dataclass(frozen=True)
class RawSection:
    """One leg of a journey (public transport, walking, transfer, ...)."""

    type: str | None = None
    display_informations: DisplayInformations | None = None
    stop_date_times: tuple[RawStopDateTime, ...] = ()
    departure_date_time: str | None = None
    arrival_date_time: str | None = None
    base_departure_date_time: str | None = None
    base_arrival_date_time: str | None = None


@dataclass(frozen=True)
class RawJourney:
    """One upstream trip candidate, possibly multi-leg."""

    sections: tuple[RawSection, ...] = field(default_factory=tuple)
    departure_date_time: str | None = None
    arrival_date_time: str | None = None
    duration_s: int = 0
