"""
Exceptions raised by the holiday resolver.
"""


class HolidayError(Exception):
    """Base class for all holiday resolver errors."""


class HolidayConfigurationError(HolidayError, ValueError):
    """Invalid rule data, custom holiday or environment configuration."""


class UnsupportedCountryError(HolidayConfigurationError):
    """No rule dataset exists for the requested country."""

    def __init__(self, country: str):
        super().__init__(f"Unsupported country: {country!r}")
        self.country = country


class UnsupportedProjection(HolidayError):
    """The rule kind cannot be projected to a single date."""


class SubstituteSearchError(HolidayError, RuntimeError):
    """The substitute walk did not find a free day within its bound."""


class HolidayNotInitializedError(HolidayError, RuntimeError):
    """The remote holiday list was queried before initialization."""
