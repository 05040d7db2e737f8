"""Line configuration domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineConfiguration:
    """Which line to follow, where, and in which timezone its schedules are expressed."""

    timezone: str = "Europe/Paris"
    network: str = "RER"
    line_code: str = "C"
    mission_placeholder: str = "----"
    default_origin_id: str = "stop_area:SNCF:87758011"  # Issy - Val de Seine
    default_destination_id: str = "stop_area:SNCF:87393843"  # Versailles Rive Gauche
    max_results: int = 6  # Maximum records returned per request
