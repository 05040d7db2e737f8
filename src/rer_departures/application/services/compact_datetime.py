"""Parsing of compact upstream timestamps (YYYYMMDDTHHMMSS).

Upstream timestamps carry no offset: they are wall-clock times in the
transit network's home timezone. They are split positionally and localized
with pytz so that the offset in effect on that calendar date (winter or
summer time) is used.
"""

import logging
import re
from datetime import datetime
from functools import lru_cache

import pytz
from pytz.tzinfo import BaseTzInfo

logger = logging.getLogger(__name__)

COMPACT_DATETIME_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})$")


@lru_cache(maxsize=8)
def get_timezone(name: str) -> BaseTzInfo:
    """Return the pytz timezone for an IANA name."""
    return pytz.timezone(name)


def parse_compact_datetime(value: str | None, timezone_name: str) -> datetime | None:
    """Parse a compact timestamp into an aware datetime in the given zone.

    Args:
        value: Timestamp such as "20240315T143000".
        timezone_name: IANA zone the wall-clock time is expressed in.

    Returns:
        Aware datetime, or None if the value is missing or malformed.
    """
    if not value or not isinstance(value, str):
        return None

    match = COMPACT_DATETIME_PATTERN.match(value.strip())
    if not match:
        logger.debug(f"Ignoring malformed timestamp {value!r}")
        return None

    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        naive = datetime(year, month, day, hour, minute, second)
    except ValueError:
        logger.debug(f"Ignoring out-of-range timestamp {value!r}")
        return None

    # is_dst=False picks the standard-time reading for the ambiguous autumn hour
    # and shifts non-existent spring times forward.
    tz = get_timezone(timezone_name)
    localized = tz.localize(naive, is_dst=False)
    return tz.normalize(localized)


def format_local_time(moment: datetime, timezone_name: str) -> str:
    """Format an aware datetime as HH:MM in the given zone."""
    return moment.astimezone(get_timezone(timezone_name)).strftime("%H:%M")


def delay_in_minutes(actual: datetime | None, scheduled: datetime | None) -> int | None:
    """Whole minutes between scheduled and actual, never negative.

    Returns None when either side is missing, so callers can tell "on time"
    apart from "no delay information".
    """
    if actual is None or scheduled is None:
        return None
    minutes = int((actual - scheduled).total_seconds() // 60)
    return max(0, minutes)
