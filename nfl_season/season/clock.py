"""Time sources for season classification.

Every operation that needs "now" takes a clock instead of reading the system
time directly, so tests can pin the instant.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from nfl_season.exceptions import InvalidDateError

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local wall-clock time (naive)."""
    return datetime.now()


def as_datetime(moment: date | datetime) -> datetime:
    """Widen a date to midnight; datetimes pass through unchanged."""
    if isinstance(moment, datetime):
        return moment
    return datetime(moment.year, moment.month, moment.day)


def fixed_clock(moment: date | datetime) -> Clock:
    """Return a clock that always reports the same instant."""
    pinned = as_datetime(moment)

    def _clock() -> datetime:
        return pinned

    return _clock


def parse_moment(value: str) -> datetime:
    """
    Parse an ISO date or datetime string.

    Args:
        value: "YYYY-MM-DD" or an ISO 8601 datetime.

    Returns:
        Parsed instant; plain dates become midnight.

    Raises:
        InvalidDateError: If the string is not a valid ISO date or datetime.
    """
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date '{value}': expected YYYY-MM-DD or ISO datetime"
        ) from e
