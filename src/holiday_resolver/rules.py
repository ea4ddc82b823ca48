"""
Holiday rule models.

A rule describes how to derive a holiday's date(s) for any year. Rule datasets
are stored as YAML, one file per country, and validated into these models.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class RuleKind(str, Enum):
    """How a rule's date is derived."""
    FIXED_DATE = "fixed_date"
    NTH_WEEKDAY = "nth_weekday"
    LUNAR_DATE = "lunar_date"
    MOVABLE_FEAST = "movable_feast"
    HIJRI_DATE = "hijri_date"
    LUNAR_SPAN = "lunar_span"
    EXPLICIT_DATES = "explicit_dates"

    @property
    def projectable(self) -> bool:
        """Kinds resolved to exactly one date by direct projection."""
        return self in (RuleKind.FIXED_DATE, RuleKind.NTH_WEEKDAY, RuleKind.LUNAR_DATE)


class Weekday(str, Enum):
    """Weekdays."""
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"

    @property
    def iso_weekday(self) -> int:
        """ISO weekday (1=Monday, 7=Sunday)."""
        return _ISO_WEEKDAYS.index(self) + 1

    @classmethod
    def from_iso(cls, value: int) -> "Weekday":
        if not 1 <= value <= 7:
            raise ValueError(f"weekday must be between 1 and 7, got {value}")
        return _ISO_WEEKDAYS[value - 1]


_ISO_WEEKDAYS = list(Weekday)


class SubstitutePolicy(str, Enum):
    """Country policy for substitute (observed) holidays."""
    NONE = "none"
    OBSERVED_NEAREST_WEEKDAY = "observed_nearest_weekday"
    SUNDAY_NEXT_FREE_DAY = "sunday_next_free_day"
    WEEKEND_NEXT_FREE_WEEKDAY = "weekend_next_free_weekday"
    SUNDAY_NEXT_FREE_WEEKDAY = "sunday_next_free_weekday"
    SUNDAY_OR_OVERLAP = "sunday_or_overlap"


class LunarSpanStyle(str, Enum):
    """Shape of the Lunar New Year holiday block."""
    THREE_DAY = "three_day"
    TWO_DAY = "two_day"
    FIVE_DAY = "five_day"


class EasterPattern(str, Enum):
    """Which days around Easter Sunday are holidays."""
    FOUR_DAY = "four_day"
    GOOD_FRIDAY = "good_friday"


_REQUIRED_FIELDS: dict[RuleKind, tuple[str, ...]] = {
    RuleKind.FIXED_DATE: ("month", "day"),
    RuleKind.NTH_WEEKDAY: ("month", "weekday", "ordinal"),
    RuleKind.LUNAR_DATE: ("lunar_month", "lunar_day"),
    RuleKind.MOVABLE_FEAST: (),
    RuleKind.HIJRI_DATE: ("hijri_month", "hijri_day", "approx_month", "approx_day"),
    RuleKind.LUNAR_SPAN: (),
    RuleKind.EXPLICIT_DATES: ("dates",),
}


class HolidayRule(BaseModel):
    """A declarative holiday rule."""
    name: str
    kind: RuleKind
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day: Optional[int] = Field(default=None, ge=1, le=31)
    weekday: Optional[Weekday] = None
    ordinal: Optional[int] = None
    lunar_month: Optional[int] = Field(default=None, ge=1, le=12)
    lunar_day: Optional[int] = Field(default=None, ge=1, le=30)
    hijri_month: Optional[int] = Field(default=None, ge=1, le=12)
    hijri_day: Optional[int] = Field(default=None, ge=1, le=30)
    approx_month: Optional[int] = Field(default=None, ge=1, le=12)
    approx_day: Optional[int] = Field(default=None, ge=1, le=31)
    dates: Optional[list[date]] = None
    recurring: bool = True
    year: Optional[int] = None

    @field_validator("weekday", mode="before")
    @classmethod
    def coerce_iso_weekday(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return Weekday.from_iso(v)
        return v

    @field_validator("ordinal")
    @classmethod
    def validate_ordinal(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v != -1 and v < 1:
            raise ValueError(f"ordinal must be positive or -1 (last), got {v}")
        return v

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "HolidayRule":
        missing = [f for f in _REQUIRED_FIELDS[self.kind] if getattr(self, f) is None]
        if missing:
            raise ValueError(f"{self.kind.value} rule {self.name!r} requires {', '.join(missing)}")
        if not self.recurring and self.year is None:
            raise ValueError(f"Non-recurring holiday {self.name!r} requires a year")
        return self

    def applies_to(self, year: int) -> bool:
        """Recurring rules apply every year, pinned rules only in their year."""
        return self.recurring or self.year == year


class CustomHolidayRule(HolidayRule):
    """A user-defined holiday. Always a fixed date."""
    kind: RuleKind = RuleKind.FIXED_DATE
    substitute_holiday: bool = True

    @field_validator("kind", mode="before")
    @classmethod
    def force_fixed_date(cls, v: Any) -> RuleKind:
        return RuleKind.FIXED_DATE


class CountryCalendar(BaseModel):
    """Root model for a country's rule dataset."""
    country: str
    substitute_policy: SubstitutePolicy = SubstitutePolicy.NONE
    lunar_new_year: Optional[LunarSpanStyle] = None
    easter: Optional[EasterPattern] = None
    substitute_exempt: list[str] = Field(default_factory=list)
    # Holidays that earn an extra weekday off when they fall on the same day
    collision_extra_day: list[str] = Field(default_factory=list)
    rules: list[HolidayRule] = Field(default_factory=list)

    @field_validator("country")
    @classmethod
    def normalize_country(cls, v: str) -> str:
        return v.lower()

    @model_validator(mode="after")
    def validate_expanders(self) -> "CountryCalendar":
        kinds = {rule.kind for rule in self.rules}
        if RuleKind.LUNAR_SPAN in kinds and self.lunar_new_year is None:
            raise ValueError(f"{self.country}: lunar_span rules need lunar_new_year")
        if RuleKind.MOVABLE_FEAST in kinds and self.easter is None:
            raise ValueError(f"{self.country}: movable_feast rules need easter")
        return self

    @property
    def span_label(self) -> Optional[str]:
        """Name of the Lunar New Year span rule, if the country has one."""
        for rule in self.rules:
            if rule.kind is RuleKind.LUNAR_SPAN:
                return rule.name
        return None
