"""Utility functions and configuration management."""

from nfl_season.utils.config import get_settings
from nfl_season.utils.logging import log_context, setup_logging

__all__ = ["get_settings", "log_context", "setup_logging"]
