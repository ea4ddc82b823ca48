"""
Calendar conversion service.

Converts between Gregorian dates and lunisolar or Hijri coordinates and
computes Easter Sunday. Stateless; conversion failures propagate.
"""

from datetime import date
from typing import Protocol

import pandas as pd
from hijridate import Gregorian, Hijri
from lunardate import LunarDate
from pandas.tseries.offsets import Easter


class CalendarConversion(Protocol):
    """Protocol for the calendar conversions the builder depends on."""

    def lunar_to_solar(self, year: int, month: int, day: int) -> date: ...

    def solar_to_lunar(self, d: date) -> tuple[int, int, int]: ...

    def easter_sunday(self, year: int) -> date: ...

    def hijri_to_gregorian(self, hijri_year: int, hijri_month: int, hijri_day: int) -> date: ...

    def gregorian_to_hijri(self, d: date) -> tuple[int, int, int]: ...


class DefaultCalendarConversion:
    """Conversions backed by lunardate, hijridate and pandas.

    Hijri dates follow the Umm al-Qura calendar. Countries that fix their
    holidays by moon sighting can be a day off from it (Singapore put Hari
    Raya Puasa 2023 on April 22, Umm al-Qura on April 21) and should inject
    their own CalendarConversion.
    """

    def lunar_to_solar(self, year: int, month: int, day: int) -> date:
        return LunarDate(year, month, day).toSolarDate()

    def solar_to_lunar(self, d: date) -> tuple[int, int, int]:
        lunar = LunarDate.fromSolarDate(d.year, d.month, d.day)
        return lunar.year, lunar.month, lunar.day

    def easter_sunday(self, year: int) -> date:
        # Easter() rolls Jan 1 forward to that year's Easter Sunday
        return (pd.Timestamp(year=year, month=1, day=1) + Easter()).date()

    def hijri_to_gregorian(self, hijri_year: int, hijri_month: int, hijri_day: int) -> date:
        g = Hijri(hijri_year, hijri_month, hijri_day).to_gregorian()
        return date(g.year, g.month, g.day)

    def gregorian_to_hijri(self, d: date) -> tuple[int, int, int]:
        h = Gregorian(d.year, d.month, d.day).to_hijri()
        return h.year, h.month, h.day
