"""
Test cases for holiday service.
"""

from datetime import date, datetime

import pytest
from freezegun import freeze_time

from holiday_resolver.errors import UnsupportedCountryError
from holiday_resolver.holidays import HolidayChecker, to_date
from holiday_resolver.store import RuleStore


class TestToDate:
    def test_accepted_inputs(self):
        assert to_date(date(2025, 1, 1)) == date(2025, 1, 1)
        assert to_date(datetime(2025, 1, 1, 15, 30)) == date(2025, 1, 1)
        assert to_date("2025-01-01") == date(2025, 1, 1)
        assert to_date("2025-01-01T09:00:00") == date(2025, 1, 1)

    @freeze_time("2025-12-25")
    def test_none_is_today(self):
        assert to_date(None) == date(2025, 12, 25)

    def test_invalid_string(self):
        with pytest.raises(ValueError):
            to_date("not-a-date")


class TestHolidayChecker:

    def test_minimal_fixture(self, fixture_data_dir):
        checker = HolidayChecker(RuleStore(fixture_data_dir))

        assert checker.is_holiday("us", "2025-01-01")
        assert not checker.is_holiday("us", "2025-01-02")

    @freeze_time("2025-12-25")
    def test_defaults_to_today(self, checker):
        assert checker.is_holiday("us")
        assert checker.get_holiday_name("us") == "Christmas Day"

    def test_country_case_insensitive(self, checker):
        assert checker.is_holiday("KR", "2025-03-01")

    def test_unsupported_country(self, checker):
        with pytest.raises(UnsupportedCountryError):
            checker.is_holiday("zz", "2025-01-01")

    def test_regular_day_not_holiday(self, checker):
        assert not checker.is_holiday("kr", date(2025, 3, 15))
        assert not checker.is_holiday("us", date(2025, 7, 14))

    def test_holidays_for_year(self, checker):
        holidays = checker.holidays_for_year("kr", 2025)

        assert list(holidays) == sorted(holidays)
        assert holidays[date(2025, 5, 5)] == "어린이날 + 부처님오신날"
        assert holidays[date(2025, 5, 6)] == "어린이날 + 부처님오신날 (substitute)"
        assert holidays[date(2025, 10, 8)] == "추석 연휴 (substitute)"


class TestKorea:

    def test_fixed_holidays(self, checker):
        assert checker.get_holiday_name("kr", "2025-01-01") == "신정"
        assert checker.get_holiday_name("kr", "2025-08-15") == "광복절"
        assert checker.get_holiday_name("kr", "2025-12-25") == "성탄절"

    def test_overlap_substitute(self, checker):
        assert checker.get_holiday_name("kr", "2025-05-06") == "어린이날 + 부처님오신날 (substitute)"

    def test_chuseok_sunday_substitute(self, checker):
        # 추석 연휴 starts on Sunday 2025-10-05
        assert checker.is_holiday("kr", "2025-10-05")
        assert checker.is_holiday("kr", "2025-10-08")
        assert checker.get_holiday_name("kr", "2025-10-09") == "한글날"
        assert not checker.is_holiday("kr", "2025-10-10")

    def test_lunar_new_year_on_saturday(self, checker):
        assert checker.get_holiday_name("kr", "2027-02-06") == "설날 연휴"
        assert checker.get_holiday_name("kr", "2027-02-07") == "설날"
        assert checker.get_holiday_name("kr", "2027-02-08") == "설날 연휴"
        assert not checker.is_holiday("kr", "2027-02-05")
        assert checker.get_holiday_name("kr", "2027-02-09") == "설날 연휴 (substitute)"
        assert not checker.is_holiday("kr", "2027-02-10")

    def test_lunar_new_year_without_sunday(self, checker):
        assert checker.is_holiday("kr", "2026-02-16")
        assert checker.is_holiday("kr", "2026-02-18")
        assert not checker.is_holiday("kr", "2026-02-19")

    def test_chuseok_on_foundation_day(self, checker):
        assert checker.get_holiday_name("kr", "2028-10-03") == "추석 + 개천절"
        assert checker.is_holiday("kr", "2028-10-05")

    def test_saturday_has_no_substitute(self, checker):
        # 개천절 2026 is a Saturday
        assert checker.is_holiday("kr", "2026-10-03")
        assert not checker.is_holiday("kr", "2026-10-05")


class TestUnitedStates:

    def test_floating_holidays(self, checker):
        assert checker.get_holiday_name("us", "2025-01-20") == "Martin Luther King Jr. Day"
        assert checker.get_holiday_name("us", "2025-05-26") == "Memorial Day"
        assert checker.get_holiday_name("us", "2025-09-01") == "Labor Day"
        assert checker.get_holiday_name("us", "2025-11-27") == "Thanksgiving Day"

    def test_saturday_observed_on_friday(self, checker):
        assert checker.get_holiday_name("us", "2026-07-03") == "Independence Day (substitute)"
        assert checker.is_holiday("us", "2027-12-24")

    def test_sunday_observed_on_monday(self, checker):
        assert checker.is_holiday("us", "2027-07-05")


class TestJapan:

    def test_sunday_walks_over_holidays(self, checker):
        # Greenery Day 2025 is a Sunday, Children's Day follows
        assert checker.get_holiday_name("jp", "2025-05-06") == "Greenery Day (substitute)"

    def test_equinox(self, checker):
        assert checker.get_holiday_name("jp", "2025-03-20") == "Vernal Equinox Day"
        assert checker.is_holiday("jp", "2025-09-23")


class TestAustralia:

    def test_weekend_substitutes(self, checker):
        assert checker.is_holiday("au", "2025-01-27")
        assert checker.is_holiday("au", "2027-04-26")

    def test_christmas_on_friday(self, checker):
        # Boxing Day 2026 is a Saturday
        assert checker.get_holiday_name("au", "2026-12-28") == "Boxing Day (substitute)"

    def test_easter_span(self, checker):
        for day in ("2025-04-18", "2025-04-19", "2025-04-20", "2025-04-21"):
            assert checker.is_holiday("au", day)
        assert not checker.is_holiday("au", "2025-04-22")


class TestSingapore:

    def test_good_friday_only(self, sg_checker):
        assert sg_checker.is_holiday("sg", "2025-04-18")
        assert not sg_checker.is_holiday("sg", "2025-04-19")
        assert not sg_checker.is_holiday("sg", "2025-04-20")
        assert not sg_checker.is_holiday("sg", "2025-04-21")

    def test_hari_raya(self, sg_checker):
        assert sg_checker.get_holiday_name("sg", "2024-04-10") == "Hari Raya Puasa"
        assert sg_checker.get_holiday_name("sg", "2024-06-17") == "Hari Raya Haji"

    def test_hari_raya_on_saturday(self, sg_checker):
        # Hari Raya Puasa 2023 is a Saturday, no substitute
        assert sg_checker.is_holiday("sg", "2023-04-22")
        assert not sg_checker.is_holiday("sg", "2023-04-24")

    def test_deepavali_on_sunday(self, checker):
        assert checker.get_holiday_name("sg", "2025-10-20") == "Deepavali"
        assert checker.is_holiday("sg", "2026-11-08")
        assert checker.get_holiday_name("sg", "2026-11-09") == "Deepavali (substitute)"

    def test_chinese_new_year_sunday(self, sg_checker):
        assert sg_checker.is_holiday("sg", "2023-01-22")
        assert sg_checker.is_holiday("sg", "2023-01-23")
        assert sg_checker.get_holiday_name("sg", "2023-01-24") == "Chinese New Year (substitute)"


class TestTaiwan:

    def test_lunar_new_year_five_days(self, checker):
        for day in range(27, 32):
            assert checker.get_holiday_name("tw", f"2025-01-{day}") == "春節"
        assert not checker.is_holiday("tw", "2025-02-03")

    def test_dragon_boat_on_saturday(self, checker):
        assert checker.get_holiday_name("tw", "2025-05-31") == "端午節"
        assert checker.get_holiday_name("tw", "2025-05-30") == "端午節 (substitute)"

    def test_merged_spring_holidays(self, checker):
        assert checker.get_holiday_name("tw", "2025-04-04") == "兒童節 + 清明節"
        assert checker.get_holiday_name("tw", "2025-04-03") == "兒童節 + 清明節 (substitute)"
        assert not checker.is_holiday("tw", "2025-04-02")
        assert not checker.is_holiday("tw", "2025-04-07")

    def test_spring_holidays_apart(self, checker):
        # 2026: 兒童節 on Saturday 04-04, 清明節 on Sunday 04-05
        assert checker.get_holiday_name("tw", "2026-04-03") == "兒童節 (substitute)"
        assert checker.get_holiday_name("tw", "2026-04-06") == "清明節 (substitute)"
        assert not checker.is_holiday("tw", "2026-04-02")
