"""
Pytest fixtures for the holiday resolver tests.
"""

from datetime import date
from pathlib import Path

import pytest

from holiday_resolver.conversion import DefaultCalendarConversion
from holiday_resolver.holidays import HolidayChecker
from holiday_resolver.store import RuleStore


class PinnedHijriConversion(DefaultCalendarConversion):
    """Real lunar and Easter conversions, Hijri dates pinned to gazetted days.

    Tabular and observed Hijri calendars disagree by a day in some years, so
    tests pin the conversion instead of depending on one of them.
    """

    def __init__(self, hijri_years: dict[int, int], gregorian: dict[tuple[int, int, int], date]):
        self.hijri_years = hijri_years
        self.gregorian = gregorian
        self.anchors: list[date] = []

    def gregorian_to_hijri(self, d: date) -> tuple[int, int, int]:
        self.anchors.append(d)
        return self.hijri_years[d.year], 1, 1

    def hijri_to_gregorian(self, hijri_year: int, hijri_month: int, hijri_day: int) -> date:
        return self.gregorian[(hijri_year, hijri_month, hijri_day)]


@pytest.fixture
def store() -> RuleStore:
    """A fresh rule store with the bundled datasets and no custom holidays."""
    return RuleStore()


@pytest.fixture
def checker(store: RuleStore) -> HolidayChecker:
    return HolidayChecker(store)


@pytest.fixture
def singapore_hijri() -> PinnedHijriConversion:
    """Hari Raya Puasa and Hari Raya Haji as gazetted in Singapore 2023-2025."""
    return PinnedHijriConversion(
        hijri_years={2023: 1444, 2024: 1445, 2025: 1446},
        gregorian={
            (1444, 10, 1): date(2023, 4, 22),
            (1444, 12, 10): date(2023, 6, 29),
            (1445, 10, 1): date(2024, 4, 10),
            (1445, 12, 10): date(2024, 6, 17),
            (1446, 10, 1): date(2025, 3, 31),
            (1446, 12, 10): date(2025, 6, 7),
        },
    )


@pytest.fixture
def sg_checker(store: RuleStore, singapore_hijri: PinnedHijriConversion) -> HolidayChecker:
    return HolidayChecker(store, singapore_hijri)


@pytest.fixture
def fixture_data_dir(tmp_path: Path) -> Path:
    """A dataset directory with a single minimal "us" calendar."""
    (tmp_path / "us.yaml").write_text(
        "country: us\n"
        "substitute_policy: observed_nearest_weekday\n"
        "rules:\n"
        "  - {name: New Year's Day, kind: fixed_date, month: 1, day: 1}\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
