"""
Holiday resolver package initialization.
"""

from .builder import HolidayMapBuilder
from .conversion import CalendarConversion, DefaultCalendarConversion
from .errors import (
    HolidayConfigurationError,
    HolidayError,
    HolidayNotInitializedError,
    SubstituteSearchError,
    UnsupportedCountryError,
    UnsupportedProjection,
)
from .holidays import HolidayChecker
from .remote import RemoteHolidayList
from .rules import CustomHolidayRule, HolidayRule, RuleKind, SubstitutePolicy, Weekday
from .store import RuleStore

__all__ = [
    "CalendarConversion",
    "CustomHolidayRule",
    "DefaultCalendarConversion",
    "HolidayChecker",
    "HolidayConfigurationError",
    "HolidayError",
    "HolidayMapBuilder",
    "HolidayNotInitializedError",
    "HolidayRule",
    "RemoteHolidayList",
    "RuleKind",
    "RuleStore",
    "SubstitutePolicy",
    "SubstituteSearchError",
    "UnsupportedCountryError",
    "UnsupportedProjection",
    "Weekday",
]
