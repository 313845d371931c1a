"""NFL season phase classifier.

The season year is the calendar year the season starts in. Each season has
three anchor days (defaults are approximate):

- season start: Sept 1 of the season year
- regular season end: Jan 8 of the following year
- playoffs end: Feb 15 of the following year

Anchors are compared as midnight at the start of the anchor day, so later on
Jan 8 is already playoffs and later on Feb 15 is already offseason.
"""

from __future__ import annotations

from datetime import date, datetime

import structlog

from nfl_season.exceptions import SeasonRangeError
from nfl_season.models.season import SeasonCalendar, SeasonInfo, SeasonStatus
from nfl_season.season.clock import Clock, as_datetime, system_clock
from nfl_season.utils.config import get_settings

logger = structlog.get_logger(__name__)


def default_calendar() -> SeasonCalendar:
    """Calendar built from the active settings."""
    return get_settings().season_calendar()


def _at_midnight(day: date, like: datetime) -> datetime:
    # Keep aware and naive instants comparable.
    return datetime(day.year, day.month, day.day, tzinfo=like.tzinfo)


def compute_season_info(
    now: date | datetime | None = None,
    *,
    clock: Clock | None = None,
    calendar: SeasonCalendar | None = None,
) -> SeasonInfo:
    """
    Classify an instant into a phase of the NFL season.

    Args:
        now: Instant to classify. Dates are treated as midnight. When omitted,
            the clock is read.
        clock: Time source used when ``now`` is omitted (default: system clock).
        calendar: Anchor days (default: from settings).

    Returns:
        Freshly computed SeasonInfo.

    Raises:
        SeasonRangeError: If the season anchors fall outside the supported date range.
    """
    if now is None:
        now = (clock or system_clock)()
    moment = as_datetime(now)
    calendar = calendar or default_calendar()

    year = calendar.season_year_for(moment)
    try:
        start_day, regular_end_day, playoffs_end_day = calendar.anchors(year)
    except (ValueError, OverflowError) as e:
        raise SeasonRangeError(f"Season {year} is outside the supported date range") from e

    start = _at_midnight(start_day, moment)
    regular_end = _at_midnight(regular_end_day, moment)
    playoffs_end = _at_midnight(playoffs_end_day, moment)

    if moment < start:
        status = SeasonStatus.OFFSEASON
    elif moment <= regular_end:
        status = SeasonStatus.REGULAR
    elif moment <= playoffs_end:
        status = SeasonStatus.PLAYOFFS
    else:
        status = SeasonStatus.OFFSEASON

    info = SeasonInfo(
        year=year,
        has_started=moment >= start,
        has_ended=moment > playoffs_end,
        is_offseason=status is SeasonStatus.OFFSEASON,
        season_start_date=start_day,
        regular_season_end_date=regular_end_day,
        season_end_date=playoffs_end_day,
        status=status,
    )
    logger.debug(
        "season_info_computed",
        at=moment.isoformat(),
        year=info.year,
        status=info.status.value,
    )
    return info


def get_current_season_info(
    clock: Clock | None = None, calendar: SeasonCalendar | None = None
) -> SeasonInfo:
    """Classify the instant reported by ``clock`` (default: now)."""
    return compute_season_info(clock=clock, calendar=calendar)
