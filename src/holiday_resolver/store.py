"""
Rule store: per-country base rules from YAML plus in-memory custom rules.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from . import config
from .errors import HolidayConfigurationError, UnsupportedCountryError
from .rules import CountryCalendar, CustomHolidayRule, HolidayRule

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


class RuleStore:
    """Holds base and custom holiday rules, keyed by lowercase country code.

    Base datasets are loaded once per country and never mutated. Custom rules
    live in memory for the store's lifetime; writes are not synchronized.
    """

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir else (config.data_dir() or DATA_DIR)
        self._profiles: dict[str, CountryCalendar] = {}
        self._custom: dict[str, list[CustomHolidayRule]] = {}

    def profile(self, country: str) -> CountryCalendar:
        """Load (once) and return the dataset for a country."""
        key = country.lower()
        if key not in self._profiles:
            self._profiles[key] = self._load(key)
        return self._profiles[key]

    def _load(self, country: str) -> CountryCalendar:
        path = self.data_dir / f"{country}.yaml"
        if not country.isalpha() or not path.is_file():
            raise UnsupportedCountryError(country)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        calendar = CountryCalendar.model_validate(data)

        if calendar.country != country:
            raise HolidayConfigurationError(
                f"{path.name} declares country {calendar.country!r}"
            )
        logger.debug("Loaded %d base rules for %s", len(calendar.rules), country)
        return calendar

    def base_rules(self, country: str) -> list[HolidayRule]:
        return list(self.profile(country).rules)

    def custom_rules(self, country: str) -> list[CustomHolidayRule]:
        return list(self._custom.get(country.lower(), []))

    def applicable_rules(self, country: str, year: int) -> list[HolidayRule]:
        """Base rules in stored order, then custom rules that apply in year."""
        rules = self.base_rules(country)
        rules.extend(r for r in self.custom_rules(country) if r.applies_to(year))
        return rules

    def set_custom_holiday(
        self,
        rule: CustomHolidayRule | Mapping[str, Any],
        country: Optional[str] = None,
    ) -> CustomHolidayRule:
        """Add a custom holiday, replacing any custom rule on the same month/day."""
        key = (country or config.default_country()).lower()

        if isinstance(rule, Mapping):
            try:
                rule = CustomHolidayRule.model_validate(dict(rule))
            except ValidationError as e:
                raise HolidayConfigurationError(f"Invalid custom holiday: {e}") from e
        elif not rule.recurring and rule.year is None:
            raise HolidayConfigurationError(
                f"Non-recurring holiday {rule.name!r} requires a year"
            )

        existing = [
            r for r in self._custom.get(key, [])
            if not (r.month == rule.month and r.day == rule.day)
        ]
        self._custom[key] = [*existing, rule]

        logger.info(
            "Custom holiday %r set for %s on %02d-%02d", rule.name, key, rule.month, rule.day
        )
        return rule

    def remove_custom_holidays(self, country: str) -> None:
        """Drop every custom holiday of one country."""
        self._custom.pop(country.lower(), None)

    def clear_custom_holidays(self) -> None:
        """Wipe custom holidays for all countries (test reset hook)."""
        self._custom.clear()
