"""
Holiday service: answers whether a date is a public holiday in a country.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional, Union

from .builder import HolidayMap, HolidayMapBuilder
from .conversion import CalendarConversion
from .rules import CustomHolidayRule
from .store import RuleStore
from .substitutes import substitutes_for

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

SUBSTITUTE_SUFFIX = " (substitute)"


def to_date(value: Optional[DateLike]) -> date:
    """Normalize a date, datetime or ISO string; None means today."""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


class HolidayChecker:
    """Checks if a date is a holiday, including substitute holidays."""

    def __init__(
        self,
        store: Optional[RuleStore] = None,
        conversion: Optional[CalendarConversion] = None,
    ):
        self.store = store or RuleStore()
        self.builder = HolidayMapBuilder(self.store, conversion)

    def _exempt_dates(self, country: str, year: int, holidays: HolidayMap) -> set[str]:
        """Days held only by custom holidays that opted out of substitution."""
        exempt = set()
        for rule in self.store.custom_rules(country):
            if rule.substitute_holiday or not rule.applies_to(year):
                continue
            key = date(year, rule.month, rule.day).isoformat()
            if holidays.get(key) == rule.name:
                exempt.add(key)
        return exempt

    def _substitutes(self, country: str, year: int, holidays: HolidayMap) -> dict[date, str]:
        """Substitute days of the year mapped to the label they stand in for."""
        profile = self.store.profile(country)
        exempt = self._exempt_dates(country, year, holidays)
        result: dict[date, str] = {}

        for key, name in holidays.items():
            if key in exempt:
                continue
            for substitute in substitutes_for(profile, holidays, date.fromisoformat(key)):
                result.setdefault(substitute, name)
        return result

    def is_holiday(self, country: str, d: Optional[DateLike] = None) -> bool:
        """Checks if date is a holiday or a substitute holiday."""
        return self.get_holiday_name(country, d) is not None

    def get_holiday_name(self, country: str, d: Optional[DateLike] = None) -> Optional[str]:
        """Returns holiday name or None."""
        day = to_date(d)
        holidays = self.builder.build(country, day.year)

        name = holidays.get(day.isoformat())
        if name is not None:
            return name

        substituted = self._substitutes(country, day.year, holidays).get(day)
        if substituted is not None:
            logger.debug("%s %s is a substitute for %s", country, day, substituted)
            return f"{substituted}{SUBSTITUTE_SUFFIX}"
        return None

    def holidays_for_year(self, country: str, year: int) -> dict[date, str]:
        """All holidays and substitute holidays of a year, in date order."""
        holidays = self.builder.build(country, year)
        result = {date.fromisoformat(key): name for key, name in holidays.items()}

        for day, name in self._substitutes(country, year, holidays).items():
            if day.year == year:
                result.setdefault(day, f"{name}{SUBSTITUTE_SUFFIX}")
        return dict(sorted(result.items()))

    def set_custom_holiday(
        self, rule: CustomHolidayRule | Mapping[str, Any], country: Optional[str] = None
    ) -> CustomHolidayRule:
        """Shortcut for RuleStore.set_custom_holiday."""
        return self.store.set_custom_holiday(rule, country)

