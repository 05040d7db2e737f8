"""Normalized departure domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DepartureStatus(str, Enum):
    """Display status of a departure.

    CANCELLED is part of the output vocabulary but is never derived from the
    payload shapes currently consumed.
    """

    ON_TIME = "on-time"
    DELAYED = "delayed"
    CANCELLED = "cancelled"


class NormalizedDeparture(BaseModel):
    """A flat, display-ready departure or journey record."""

    model_config = ConfigDict(frozen=True)

    departure_time: str
    arrival_time: str | None = None
    departure_iso: str
    arrival_iso: str | None = None
    mission: str
    line: str
    destination: str = ""
    delay_minutes: int = 0
    arrival_delay_minutes: int = 0
    duration_seconds: int = 0
    status: DepartureStatus = DepartureStatus.ON_TIME
    has_realtime: bool = False
