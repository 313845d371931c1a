"""NFL Season - season phase classification for fantasy football leagues."""

from nfl_season.exceptions import InvalidDateError, SeasonError, SeasonRangeError
from nfl_season.models import SeasonCalendar, SeasonInfo, SeasonStatus, season_label
from nfl_season.season import (
    compute_season_info,
    days_until_next_season,
    fixed_clock,
    format_season_date,
    get_current_season_info,
    next_season_start,
    should_display_standings,
    status_message,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidDateError",
    "SeasonCalendar",
    "SeasonError",
    "SeasonInfo",
    "SeasonRangeError",
    "SeasonStatus",
    "compute_season_info",
    "days_until_next_season",
    "fixed_clock",
    "format_season_date",
    "get_current_season_info",
    "next_season_start",
    "season_label",
    "should_display_standings",
    "status_message",
]
