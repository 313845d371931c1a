"""NFL season phase classification and display helpers."""

from nfl_season.season.classifier import (
    compute_season_info,
    default_calendar,
    get_current_season_info,
)
from nfl_season.season.clock import Clock, as_datetime, fixed_clock, parse_moment, system_clock
from nfl_season.season.display import (
    days_until_next_season,
    format_season_date,
    next_season_start,
    should_display_standings,
    status_message,
)

__all__ = [
    "Clock",
    "as_datetime",
    "compute_season_info",
    "days_until_next_season",
    "default_calendar",
    "fixed_clock",
    "format_season_date",
    "get_current_season_info",
    "next_season_start",
    "parse_moment",
    "should_display_standings",
    "status_message",
    "system_clock",
]
