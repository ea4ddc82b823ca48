"""
Substitute (observed) holiday resolution.

Each country policy is one function taking the country profile, the year's
holiday map and one holiday's date, and returning the substitute date as a
one-element list, or an empty list when that holiday yields none.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import date, timedelta

from .builder import EVE_SUFFIX, MERGE_SEPARATOR
from .errors import SubstituteSearchError
from .rules import CountryCalendar, SubstitutePolicy

logger = logging.getLogger(__name__)

MAX_SUBSTITUTE_WALK = 14

MONDAY = 1
SATURDAY = 6
SUNDAY = 7

Resolver = Callable[[CountryCalendar, Mapping[str, str], date], list[date]]


def is_weekend(d: date) -> bool:
    return d.isoweekday() in (SATURDAY, SUNDAY)


def labels_of(holidays: Mapping[str, str], d: date) -> list[str]:
    """Individual holiday names on a day, split out of a merged label."""
    name = holidays.get(d.isoformat())
    return name.split(MERGE_SEPARATOR) if name else []


def walk_forward(holidays: Mapping[str, str], start: date, *, weekdays_only: bool) -> date:
    """First day after start that is not a holiday (and not a weekend, if asked)."""
    candidate = start
    for _ in range(MAX_SUBSTITUTE_WALK):
        candidate += timedelta(days=1)
        if candidate.isoformat() in holidays:
            continue
        if weekdays_only and is_weekend(candidate):
            continue
        return candidate

    raise SubstituteSearchError(
        f"No free day within {MAX_SUBSTITUTE_WALK} days after {start.isoformat()}"
    )


def _no_substitute(profile: CountryCalendar, holidays: Mapping[str, str], d: date) -> list[date]:
    return []


def _observed_nearest_weekday(
    profile: CountryCalendar, holidays: Mapping[str, str], d: date
) -> list[date]:
    """Saturday is observed the Friday before, Sunday the Monday after.

    A weekday on which all of the profile's collision holidays coincide also
    gets the day before off, or the day after when it is a Monday.
    """
    if d.isoweekday() == SATURDAY:
        return [d - timedelta(days=1)]
    if d.isoweekday() == SUNDAY:
        return [d + timedelta(days=1)]

    collision = profile.collision_extra_day
    if collision and all(n in labels_of(holidays, d) for n in collision):
        if d.isoweekday() == MONDAY:
            return [d + timedelta(days=1)]
        return [d - timedelta(days=1)]
    return []


def _sunday_next_free_day(
    profile: CountryCalendar, holidays: Mapping[str, str], d: date
) -> list[date]:
    if d.isoweekday() != SUNDAY:
        return []
    return [walk_forward(holidays, d, weekdays_only=False)]


def _weekend_next_free_weekday(
    profile: CountryCalendar, holidays: Mapping[str, str], d: date
) -> list[date]:
    name = holidays.get(d.isoformat(), "")
    if any(marker in name for marker in profile.substitute_exempt):
        return []
    if not is_weekend(d):
        return []
    return [walk_forward(holidays, d, weekdays_only=True)]


def _sunday_next_free_weekday(
    profile: CountryCalendar, holidays: Mapping[str, str], d: date
) -> list[date]:
    if d.isoweekday() != SUNDAY:
        return []
    return [walk_forward(holidays, d, weekdays_only=True)]


def _sunday_or_overlap(
    profile: CountryCalendar, holidays: Mapping[str, str], d: date
) -> list[date]:
    """Sunday holidays and doubly booked days move to the next free weekday.

    The Lunar New Year block is treated as one holiday: only its last day can
    trigger a substitute, and only if the block contains a Sunday.
    """
    name = holidays.get(d.isoformat(), "")
    span_label = profile.span_label
    span_names = {span_label, f"{span_label}{EVE_SUFFIX}"}

    if span_label and span_names.intersection(labels_of(holidays, d)):
        span_days = sorted(
            date.fromisoformat(key) for key, label in holidays.items()
            if span_names.intersection(label.split(MERGE_SEPARATOR))
        )
        if d != span_days[-1]:
            return []
        if not any(day.isoweekday() == SUNDAY for day in span_days):
            return []
        return [walk_forward(holidays, d, weekdays_only=True)]

    if d.isoweekday() == SUNDAY or MERGE_SEPARATOR in name:
        return [walk_forward(holidays, d, weekdays_only=True)]
    return []


RESOLVERS: dict[SubstitutePolicy, Resolver] = {
    SubstitutePolicy.NONE: _no_substitute,
    SubstitutePolicy.OBSERVED_NEAREST_WEEKDAY: _observed_nearest_weekday,
    SubstitutePolicy.SUNDAY_NEXT_FREE_DAY: _sunday_next_free_day,
    SubstitutePolicy.WEEKEND_NEXT_FREE_WEEKDAY: _weekend_next_free_weekday,
    SubstitutePolicy.SUNDAY_NEXT_FREE_WEEKDAY: _sunday_next_free_weekday,
    SubstitutePolicy.SUNDAY_OR_OVERLAP: _sunday_or_overlap,
}


def substitutes_for(
    profile: CountryCalendar, holidays: Mapping[str, str], holiday_date: date
) -> list[date]:
    """Substitute date(s) produced by one holiday under the country's policy."""
    result = RESOLVERS[profile.substitute_policy](profile, holidays, holiday_date)
    if result:
        logger.debug(
            "%s holiday %s substitutes to %s", profile.country, holiday_date, result[0]
        )
    return result
