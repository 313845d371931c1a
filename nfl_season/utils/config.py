"""Configuration management using environment variables."""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from nfl_season.models.season import SeasonCalendar

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Season calendar anchors (approximate)
    season_start_month: int = Field(default=9, description="Month the season starts")
    season_start_day: int = Field(default=1, description="Day of month the season starts")
    regular_season_end_month: int = Field(default=1, description="Month the regular season ends")
    regular_season_end_day: int = Field(default=8, description="Day the regular season ends")
    playoffs_end_month: int = Field(default=2, description="Month the playoffs end")
    playoffs_end_day: int = Field(default=15, description="Day the playoffs end")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or console)")
    log_dir: str | None = Field(default=None, description="Directory for log files")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid option."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is a valid option."""
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v

    class Config:
        """Pydantic configuration."""

        env_prefix = ""
        case_sensitive = False
        extra = "ignore"

    def season_calendar(self) -> SeasonCalendar:
        """
        Build the season calendar from the configured anchors.

        Returns:
            SeasonCalendar: Validated calendar.

        Raises:
            pydantic.ValidationError: If the anchors are not valid days or are out of order.
        """
        return SeasonCalendar(
            start_month=self.season_start_month,
            start_day=self.season_start_day,
            regular_season_end_month=self.regular_season_end_month,
            regular_season_end_day=self.regular_season_end_day,
            playoffs_end_month=self.playoffs_end_month,
            playoffs_end_day=self.playoffs_end_day,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()


def ensure_directories() -> None:
    """Create the log directory if one is configured."""
    settings = get_settings()

    if settings.log_dir:
        Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
