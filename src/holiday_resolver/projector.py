"""
Projects a single holiday rule onto a concrete Gregorian date.
"""

import calendar
from datetime import date

from .conversion import CalendarConversion
from .errors import UnsupportedProjection
from .rules import HolidayRule, RuleKind


def _sunday_based(iso_weekday: int) -> int:
    """Map ISO weekday (1=Monday..7=Sunday) to 0=Sunday..6=Saturday."""
    return iso_weekday % 7


def nth_weekday_of_month(year: int, month: int, iso_weekday: int, ordinal: int) -> date:
    """The ordinal-th given weekday of a month; ordinal -1 is the last one.

    An ordinal past the end of the month raises ValueError from date().
    """
    target = _sunday_based(iso_weekday)

    if ordinal == -1:
        last_day = calendar.monthrange(year, month)[1]
        last_dow = _sunday_based(date(year, month, last_day).isoweekday())
        lag = (last_dow - target + 7) % 7
        return date(year, month, last_day - lag)

    first_dow = _sunday_based(date(year, month, 1).isoweekday())
    lag = (target - first_dow + 7) % 7
    return date(year, month, 1 + lag + (ordinal - 1) * 7)


def project(rule: HolidayRule, year: int, conversion: CalendarConversion) -> date:
    """Compute the date of a fixed, nth-weekday or lunar rule in year."""
    if rule.kind is RuleKind.FIXED_DATE:
        return date(year, rule.month, rule.day)

    if rule.kind is RuleKind.NTH_WEEKDAY:
        return nth_weekday_of_month(year, rule.month, rule.weekday.iso_weekday, rule.ordinal)

    if rule.kind is RuleKind.LUNAR_DATE:
        return conversion.lunar_to_solar(year, rule.lunar_month, rule.lunar_day)

    raise UnsupportedProjection(
        f"{rule.kind.value} rule {rule.name!r} has no single projected date"
    )
