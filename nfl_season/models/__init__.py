"""Pydantic models for data validation."""

from nfl_season.models.season import SeasonCalendar, SeasonInfo, SeasonStatus, season_label

__all__ = [
    "SeasonCalendar",
    "SeasonInfo",
    "SeasonStatus",
    "season_label",
]
