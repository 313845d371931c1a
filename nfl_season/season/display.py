"""Presentation helpers for season banners, standings and countdowns."""

from __future__ import annotations

from datetime import date, datetime

from nfl_season.exceptions import SeasonError
from nfl_season.models.season import SeasonInfo, SeasonStatus
from nfl_season.season.clock import Clock, system_clock

# Fixed English names; strftime("%B") would follow the process locale.
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_STANDINGS_STATUSES = frozenset({SeasonStatus.REGULAR, SeasonStatus.PLAYOFFS})


def status_message(info: SeasonInfo) -> str:
    """
    Describe the season phase in one sentence.

    Args:
        info: Classified season.

    Returns:
        Banner text for the current phase.
    """
    year = info.year
    status = info.status

    if status is SeasonStatus.OFFSEASON:
        if not info.has_started:
            start_month = format_month(info.season_start_date)
            return (
                f"The {year} NFL season hasn't started yet. "
                f"Standings will be available once games begin in {start_month}."
            )
        return (
            f"The {year} season has ended. "
            f"New standings will be available when the {year + 1} season begins."
        )
    if status is SeasonStatus.PRESEASON:
        return (
            f"The {year} NFL preseason is underway. "
            "Regular season standings will be available once games begin."
        )
    if status is SeasonStatus.REGULAR:
        return f"The {year} NFL regular season is in progress."
    if status is SeasonStatus.PLAYOFFS:
        return f"The {year} NFL playoffs are in progress."
    raise SeasonError(f"Unknown season status: {status!r}")


def should_display_standings(info: SeasonInfo) -> bool:
    """Standings are shown during the regular season and playoffs only."""
    return info.status in _STANDINGS_STATUSES


def next_season_start(info: SeasonInfo) -> date:
    """
    First day of the next season that has not started yet.

    Args:
        info: Classified season.

    Returns:
        ``info.season_start_date`` if the season has not started, otherwise
        the same anchor day in season ``info.year + 1``.
    """
    if not info.has_started:
        return info.season_start_date

    # End dates already sit in year + 1.
    return info.season_start_date.replace(year=info.year + 1)


def days_until_next_season(
    info: SeasonInfo,
    now: date | datetime | None = None,
    *,
    clock: Clock | None = None,
) -> int:
    """Whole days from ``now`` until the next season start, never negative."""
    if now is None:
        now = (clock or system_clock)()
    today = now.date() if isinstance(now, datetime) else now
    return max((next_season_start(info) - today).days, 0)


def format_season_date(value: date | datetime) -> str:
    """Render a date as "Month Year", e.g. "September 2024"."""
    return f"{format_month(value)} {value.year}"


def format_month(value: date | datetime) -> str:
    return MONTH_NAMES[value.month - 1]
