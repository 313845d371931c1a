r"""Pydantic models for NFL season classification.

Conventions:
- Season year: integer start year, e.g. 2024 for the 2024-25 season
- Season label: "YYYY-YY" e.g. "2024-25"
- Anchors are (month, day) pairs; the start anchor falls in the season year,
  the regular-season and playoff anchors fall in the following year
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, model_validator

# Any non-leap year works for checking that a (month, day) pair exists.
_REFERENCE_YEAR = 2001


class SeasonStatus(str, Enum):
    """Phase of the NFL season."""

    PRESEASON = "preseason"
    REGULAR = "regular"
    PLAYOFFS = "playoffs"
    OFFSEASON = "offseason"


def season_label(year: int) -> str:
    """Return the human-readable label for a season year (2024 -> '2024-25')."""
    return f"{year}-{(year + 1) % 100:02d}"


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------


class SeasonCalendar(BaseModel):
    """Approximate anchor days of the NFL calendar."""

    start_month: int = Field(9, ge=1, le=12, description="Month the season starts")
    start_day: int = Field(1, ge=1, le=31, description="Day the season starts")
    regular_season_end_month: int = Field(1, ge=1, le=12, description="Month regular season ends")
    regular_season_end_day: int = Field(8, ge=1, le=31, description="Day regular season ends")
    playoffs_end_month: int = Field(2, ge=1, le=12, description="Month playoffs end")
    playoffs_end_day: int = Field(15, ge=1, le=31, description="Day playoffs end")

    class Config:
        """Pydantic configuration."""

        frozen = True

    @model_validator(mode="after")
    def validate_anchor_order(self) -> SeasonCalendar:
        start = (self.start_month, self.start_day)
        regular_end = (self.regular_season_end_month, self.regular_season_end_day)
        playoffs_end = (self.playoffs_end_month, self.playoffs_end_day)

        for name, (month, day) in (
            ("start", start),
            ("regular_season_end", regular_end),
            ("playoffs_end", playoffs_end),
        ):
            try:
                date(_REFERENCE_YEAR, month, day)
            except ValueError as e:
                raise ValueError(f"{name} anchor {month:02d}-{day:02d} is not a valid day") from e

        if not regular_end < playoffs_end:
            raise ValueError("regular_season_end must fall before playoffs_end")
        if not playoffs_end < start:
            raise ValueError("playoffs_end must fall before the next season start")
        return self

    def season_year_for(self, moment: date) -> int:
        """Season year an instant belongs to, based on the start month."""
        if moment.month >= self.start_month:
            return moment.year
        return moment.year - 1

    def season_start(self, year: int) -> date:
        return date(year, self.start_month, self.start_day)

    def anchors(self, year: int) -> tuple[date, date, date]:
        """
        Get the anchor dates of a season.

        Args:
            year: Season year.

        Returns:
            Tuple of (season start, regular season end, playoffs end).
        """
        return (
            self.season_start(year),
            date(year + 1, self.regular_season_end_month, self.regular_season_end_day),
            date(year + 1, self.playoffs_end_month, self.playoffs_end_day),
        )


# ---------------------------------------------------------------------------
# Season info
# ---------------------------------------------------------------------------


class SeasonInfo(BaseModel):
    """Snapshot of where an instant falls in the NFL season."""

    year: int = Field(..., description="Season start year (e.g. 2024 for 2024-25)")
    has_started: bool = Field(..., description="Instant is on or after the season start")
    has_ended: bool = Field(..., description="Instant is after the end of the playoffs")
    is_offseason: bool = Field(..., description="Status is offseason")
    season_start_date: date = Field(..., description="First day of the season")
    regular_season_end_date: date = Field(..., description="Last day of the regular season")
    season_end_date: date = Field(..., description="Last day of the playoffs")
    status: SeasonStatus = Field(..., description="Current phase")

    class Config:
        """Pydantic configuration."""

        frozen = True

    @model_validator(mode="after")
    def validate_consistency(self) -> SeasonInfo:
        if not self.season_start_date < self.regular_season_end_date < self.season_end_date:
            raise ValueError("season anchors must be strictly increasing")
        if self.is_offseason != (self.status is SeasonStatus.OFFSEASON):
            raise ValueError("is_offseason must match status")
        return self

    @property
    def label(self) -> str:
        return season_label(self.year)
