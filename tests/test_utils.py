"""Tests for configuration management."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError


def test_settings_validation():
    """Test settings validation."""
    from nfl_season.utils.config import Settings

    settings = Settings(log_level="info", log_format="json")
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"

    # Invalid log level
    with pytest.raises(ValueError):
        Settings(log_level="INVALID")

    # Invalid log format
    with pytest.raises(ValueError):
        Settings(log_format="invalid")


def test_settings_caching():
    """Test that settings are cached."""
    from nfl_season.utils.config import get_settings

    get_settings.cache_clear()

    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2


def test_settings_from_environment(monkeypatch):
    from nfl_season.utils.config import Settings

    monkeypatch.setenv("SEASON_START_DAY", "10")
    monkeypatch.setenv("PLAYOFFS_END_DAY", "12")

    calendar = Settings().season_calendar()

    assert calendar.start_day == 10
    assert calendar.playoffs_end_day == 12


def test_default_calendar_settings():
    from nfl_season.models.season import SeasonCalendar
    from nfl_season.utils.config import Settings

    assert Settings().season_calendar() == SeasonCalendar()


def test_invalid_calendar_settings():
    from nfl_season.utils.config import Settings

    settings = Settings(regular_season_end_month=3)

    with pytest.raises(ValidationError):
        settings.season_calendar()


def test_ensure_directories(tmp_path):
    """Test log directory creation."""
    from nfl_season.utils.config import Settings, ensure_directories

    settings = Settings(log_dir=str(tmp_path / "logs"))

    with patch("nfl_season.utils.config.get_settings", return_value=settings):
        ensure_directories()

    assert (tmp_path / "logs").exists()


def test_ensure_directories_without_log_dir(tmp_path, monkeypatch):
    from nfl_season.utils.config import Settings, ensure_directories

    monkeypatch.chdir(tmp_path)
    settings = Settings(log_dir=None)

    with patch("nfl_season.utils.config.get_settings", return_value=settings):
        ensure_directories()

    assert list(tmp_path.iterdir()) == []
