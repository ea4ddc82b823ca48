"""
Builds the per-year holiday map of a country.

The map goes from ISO date to label. When several rules land on the same
day their names are joined with " + ", which the substitute resolvers read
as a doubly booked day.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from .conversion import CalendarConversion, DefaultCalendarConversion
from .errors import HolidayConfigurationError
from .projector import project
from .rules import CountryCalendar, EasterPattern, HolidayRule, LunarSpanStyle, RuleKind
from .store import RuleStore

logger = logging.getLogger(__name__)

MERGE_SEPARATOR = " + "
EVE_SUFFIX = " 연휴"

HolidayMap = dict[str, str]


def add_holiday(holidays: HolidayMap, d: date, name: str) -> None:
    """Insert a holiday, merging names if the day is already taken."""
    key = d.isoformat()
    if key in holidays:
        holidays[key] = f"{holidays[key]}{MERGE_SEPARATOR}{name}"
    else:
        holidays[key] = name


class HolidayMapBuilder:
    """Projects every applicable rule of a country into a holiday map."""

    def __init__(self, store: RuleStore, conversion: Optional[CalendarConversion] = None):
        self.store = store
        self.conversion = conversion or DefaultCalendarConversion()

    def build(self, country: str, year: int) -> HolidayMap:
        profile = self.store.profile(country)
        holidays: HolidayMap = {}

        for rule in self.store.applicable_rules(country, year):
            if rule.kind.projectable:
                add_holiday(holidays, project(rule, year, self.conversion), rule.name)
            elif rule.kind is RuleKind.EXPLICIT_DATES:
                self._add_explicit_dates(holidays, rule, year)
            elif rule.kind is RuleKind.HIJRI_DATE:
                hijri = self.hijri_date(rule, year)
                if hijri is not None:
                    add_holiday(holidays, hijri, rule.name)
            elif rule.kind is RuleKind.LUNAR_SPAN:
                self._add_lunar_new_year(holidays, profile, rule, year)
            elif rule.kind is RuleKind.MOVABLE_FEAST:
                self._add_easter(holidays, profile, year)

        logger.debug("Built %d holidays for %s/%d", len(holidays), profile.country, year)
        return holidays

    def _add_explicit_dates(self, holidays: HolidayMap, rule: HolidayRule, year: int) -> None:
        in_year = [d for d in rule.dates or [] if d.year == year]
        if not in_year:
            logger.warning("No dates listed for %r in %d", rule.name, year)
        for d in in_year:
            add_holiday(holidays, d, rule.name)

    def hijri_date(self, rule: HolidayRule, year: int) -> Optional[date]:
        """Resolve a Hijri month/day against the Hijri year around the anchor.

        A Hijri month/day recurs at a different Gregorian date every year,
        so the approximate Gregorian anchor picks which Hijri year is meant.
        Adjacent Hijri years are tried when that one lands outside year;
        returns None if none of them falls in year.
        """
        anchor = date(year, rule.approx_month, rule.approx_day)
        hijri_year, _, _ = self.conversion.gregorian_to_hijri(anchor)

        # The Hijri year can turn over before or after the anchor
        for candidate in (hijri_year, hijri_year - 1, hijri_year + 1):
            d = self.conversion.hijri_to_gregorian(candidate, rule.hijri_month, rule.hijri_day)
            if d.year == year:
                return d

        logger.warning("%r has no date in %d", rule.name, year)
        return None

    def _add_lunar_new_year(
        self, holidays: HolidayMap, profile: CountryCalendar, rule: HolidayRule, year: int
    ) -> None:
        new_year = self.conversion.lunar_to_solar(year, 1, 1)
        style = profile.lunar_new_year
        one_day = timedelta(days=1)

        if style is LunarSpanStyle.THREE_DAY:
            eve = f"{rule.name}{EVE_SUFFIX}"
            if new_year.isoweekday() == 6:
                # Saturday start: the main day moves to Sunday
                add_holiday(holidays, new_year, eve)
                add_holiday(holidays, new_year + one_day, rule.name)
                add_holiday(holidays, new_year + 2 * one_day, eve)
            else:
                add_holiday(holidays, new_year - one_day, eve)
                add_holiday(holidays, new_year, rule.name)
                add_holiday(holidays, new_year + one_day, eve)
        elif style is LunarSpanStyle.TWO_DAY:
            add_holiday(holidays, new_year, rule.name)
            add_holiday(holidays, new_year + one_day, rule.name)
        elif style is LunarSpanStyle.FIVE_DAY:
            for offset in range(-2, 3):
                add_holiday(holidays, new_year + offset * one_day, rule.name)
        else:
            raise HolidayConfigurationError(
                f"{profile.country}: no Lunar New Year style for {rule.name!r}"
            )

    def _add_easter(self, holidays: HolidayMap, profile: CountryCalendar, year: int) -> None:
        easter = self.conversion.easter_sunday(year)

        if profile.easter is EasterPattern.FOUR_DAY:
            add_holiday(holidays, easter - timedelta(days=2), "Good Friday")
            add_holiday(holidays, easter - timedelta(days=1), "Easter Saturday")
            add_holiday(holidays, easter, "Easter Sunday")
            add_holiday(holidays, easter + timedelta(days=1), "Easter Monday")
        elif profile.easter is EasterPattern.GOOD_FRIDAY:
            add_holiday(holidays, easter - timedelta(days=2), "Good Friday")
        else:
            raise HolidayConfigurationError(f"{profile.country}: no Easter pattern configured")
