"""Mission code extraction from display metadata."""

import re

from rer_departures.domain.models.raw_journey import DisplayInformations

# Transilien missions are four capital letters, e.g. "VICK" or "ELBA".
MISSION_TOKEN_PATTERN = re.compile(r"\b[A-Z]{4}\b")


def extract_mission(
    info: DisplayInformations, line_code: str, placeholder: str
) -> str:
    """Pick the most specific train identifier available.

    Order: trip short name, then a label that is more than the line's generic
    name, then a four-letter token from the headsign, then the placeholder.
    """
    trip_short_name = info.trip_short_name.strip()
    if trip_short_name:
        return trip_short_name

    label = info.label.strip()
    generic_names = {line_code.strip().upper(), info.code.strip().upper()}
    if label and label.upper() not in generic_names:
        return label

    match = MISSION_TOKEN_PATTERN.search(info.headsign or "")
    if match:
        return match.group(0)

    return placeholder
