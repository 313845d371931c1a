"""Domain-specific exceptions for season classification."""


class SeasonError(Exception):
    """Base exception for season classification failures."""

    pass


class SeasonRangeError(SeasonError):
    """Raised when season anchors fall outside the representable date range."""

    pass


class InvalidDateError(SeasonError, ValueError):
    """Raised when a date string cannot be parsed."""

    pass
