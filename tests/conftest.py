"""Pytest configuration and fixtures."""

import logging
from datetime import date

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so captured streams don't leak between tests."""
    yield
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    structlog.reset_defaults()


@pytest.fixture
def calendar():
    """Default NFL calendar (Sept 1 / Jan 8 / Feb 15)."""
    from nfl_season.models.season import SeasonCalendar

    return SeasonCalendar()


@pytest.fixture
def scenarios():
    """Reference instants: before kickoff, regular season, playoffs, after the playoffs."""
    return {
        "A": date(2024, 8, 15),
        "B": date(2024, 9, 15),
        "C": date(2025, 1, 20),
        "D": date(2025, 3, 1),
    }


@pytest.fixture
def sample_settings(tmp_path):
    """Sample settings for testing."""
    from nfl_season.utils.config import Settings

    return Settings(
        log_level="DEBUG",
        log_format="console",
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def patch_settings(sample_settings):
    """Patch get_settings everywhere it is looked up."""
    from unittest.mock import patch

    with (
        patch("nfl_season.utils.config.get_settings", return_value=sample_settings),
        patch("nfl_season.utils.logging.get_settings", return_value=sample_settings),
        patch("nfl_season.season.classifier.get_settings", return_value=sample_settings),
        patch("nfl_season.cli.config.get_settings", return_value=sample_settings),
    ):
        yield sample_settings
