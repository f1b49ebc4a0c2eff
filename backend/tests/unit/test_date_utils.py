"""
Unit tests for calendar-date utilities.
"""

from datetime import date

import pytest

from taskplanner.core.exceptions import DateFormatError, DateRangeError, SchedulerError
from taskplanner.utils.date_utils import (
    add_days,
    add_years,
    format_date,
    parse_date,
    today,
)


class TestParseDate:
    def test_parses_yyyymmdd(self):
        assert parse_date("20240129") == date(2024, 1, 29)

    def test_leap_day(self):
        assert parse_date("20240229") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value",
        [
            "20240192",  # day 92
            "20231301",  # month 13
            "20230229",  # not a leap year
            "28.01.2024",
            "2024-01-28",
            "2024012",
            "202401290",
            "",
            " 20240129",
            "00000101",
        ],
    )
    def test_rejects_invalid(self, value):
        with pytest.raises(DateFormatError):
            parse_date(value)

    def test_error_keeps_value(self):
        with pytest.raises(DateFormatError) as exc_info:
            parse_date("20240192")
        assert exc_info.value.value == "20240192"


class TestFormatDate:
    def test_zero_pads(self):
        assert format_date(date(2024, 1, 2)) == "20240102"

    def test_small_year_is_still_eight_digits(self):
        assert format_date(date(999, 12, 31)) == "09991231"

    def test_lexical_order_matches_chronological(self):
        days = [date(2023, 12, 31), date(2024, 1, 2), date(2024, 10, 1), date(2025, 1, 1)]
        assert sorted(format_date(d) for d in days) == [format_date(d) for d in sorted(days)]


class TestArithmetic:
    def test_add_days_crosses_month(self):
        assert add_days(date(2024, 1, 31), 1) == date(2024, 2, 1)

    def test_add_days_leap_year(self):
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
        assert add_days(date(2023, 2, 28), 1) == date(2023, 3, 1)

    def test_add_years(self):
        assert add_years(date(2024, 1, 2), 1) == date(2025, 1, 2)

    def test_add_years_from_leap_day_overflows_to_march(self):
        assert add_years(date(2024, 2, 29), 1) == date(2025, 3, 1)

    def test_add_years_leap_to_leap(self):
        assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)

    @pytest.mark.parametrize("value,days", [(date(9999, 12, 31), 1), (date(1, 1, 1), -1)])
    def test_add_days_outside_calendar_range(self, value, days):
        with pytest.raises(DateRangeError) as exc_info:
            add_days(value, days)
        assert isinstance(exc_info.value, SchedulerError)

    @pytest.mark.parametrize("value", [date(9999, 1, 1), date(9996, 2, 29)])
    def test_add_years_outside_calendar_range(self, value):
        with pytest.raises(DateRangeError):
            add_years(value, 4)


def test_today_has_no_time_component():
    assert type(today()) is date
