"""
Unit Tests for date helpers
Tests for: French formatting, age, birth date validation, instant equality, timestamps
"""
import re
from datetime import date, datetime, timezone

import pytest

from student_records_api.app.utils.dates import (
    are_dates_equal,
    calculate_age,
    format_date_to_french,
    get_current_iso_date,
    is_valid_birth_date,
)

TODAY = date(2026, 10, 16)


class TestFormatDateToFrench:
    """Test format_date_to_french"""

    @pytest.mark.parametrize("value,expected", [
        ("1990-09-14", "14/09/1990"),
        ("2019-05-14", "14/05/2019"),
        ("2000-12-05", "05/12/2000"),
        ("0987-01-02", "02/01/0987"),
    ])
    def test_reorders_components(self, value, expected):
        """Test day, month and year are swapped into DD/MM/YYYY"""
        assert format_date_to_french(value) == expected

    def test_datetime_uses_calendar_date(self):
        """Test an ISO date-time keeps its own calendar date"""
        assert format_date_to_french("2020-01-02T23:30:00Z") == "02/01/2020"

    @pytest.mark.parametrize("value", ["", None, "not a date", "2023-02-30", "1990-13-01", 19900914])
    def test_invalid_input_gives_empty_string(self, value):
        """Test empty or unparseable input returns an empty string"""
        assert format_date_to_french(value) == ""


class TestCalculateAge:
    """Test calculate_age"""

    def test_birthday_already_passed(self):
        """Test age when this year's birthday is behind us"""
        assert calculate_age("1990-09-14", today=TODAY) == 36

    def test_birthday_today(self):
        """Test age counts the birthday itself"""
        assert calculate_age("1990-10-16", today=TODAY) == 36

    def test_birthday_tomorrow(self):
        """Test age is one less the day before the birthday"""
        assert calculate_age("1990-10-17", today=TODAY) == 35

    def test_earlier_month(self):
        """Test a later birth month decrements the age"""
        assert calculate_age("2000-12-05", today=TODAY) == 25

    @pytest.mark.parametrize("value", ["", None, "garbage", "2023-02-30"])
    def test_invalid_input_gives_zero(self, value):
        """Test empty or invalid dates give 0"""
        assert calculate_age(value, today=TODAY) == 0

    def test_defaults_to_current_date(self):
        """Test age without explicit today is non-negative for a past date"""
        assert calculate_age("2000-01-01") >= 25


class TestIsValidBirthDate:
    """Test is_valid_birth_date"""

    @pytest.mark.parametrize("value", ["1990-09-14", "2026-10-16", "1876-10-16", "2000-02-29"])
    def test_valid_dates(self, value):
        """Test real past dates within 150 years are accepted"""
        assert is_valid_birth_date(value, today=TODAY) is True

    def test_future_date_rejected(self):
        """Test tomorrow is rejected"""
        assert is_valid_birth_date("2026-10-17", today=TODAY) is False

    def test_older_than_150_years_rejected(self):
        """Test one day past the 150 year limit is rejected"""
        assert is_valid_birth_date("1876-10-15", today=TODAY) is False

    @pytest.mark.parametrize("value", [
        "1990-9-14",
        "14/09/1990",
        "19900914",
        " 1990-09-14",
        "1990-09-14\n",
        "1990-09-14T00:00:00",
        "1990-02-30",
        "1990-13-01",
        "1999-02-29",
        "",
        None,
        19900914,
    ])
    def test_malformed_or_impossible_dates(self, value):
        """Test anything but a real YYYY-MM-DD date is rejected"""
        assert is_valid_birth_date(value, today=TODAY) is False

    def test_leap_day_limit(self):
        """Test the 150 year limit from 29 February falls on 28 February"""
        leap_today = date(2024, 2, 29)
        assert is_valid_birth_date("1874-02-28", today=leap_today) is True
        assert is_valid_birth_date("1874-02-27", today=leap_today) is False

    def test_defaults_to_current_date(self):
        """Test validation against the real clock"""
        assert is_valid_birth_date("2000-01-01") is True
        assert is_valid_birth_date("2999-01-01") is False


class TestAreDatesEqual:
    """Test are_dates_equal"""

    def test_same_date(self):
        """Test identical strings are equal"""
        assert are_dates_equal("2020-01-01", "2020-01-01") is True

    def test_date_equals_utc_midnight(self):
        """Test a bare date means midnight UTC"""
        assert are_dates_equal("2020-01-01", "2020-01-01T00:00:00Z") is True
        assert are_dates_equal("2020-01-01T01:00:00+01:00", "2020-01-01") is True

    def test_different_dates(self):
        """Test different days are not equal"""
        assert are_dates_equal("2020-01-01", "2020-01-02") is False

    @pytest.mark.parametrize("first,second", [
        ("", "2020-01-01"),
        ("2020-01-01", None),
        (None, None),
        ("garbage", "garbage"),
    ])
    def test_missing_or_invalid(self, first, second):
        """Test missing or unparseable values are never equal"""
        assert are_dates_equal(first, second) is False


class TestGetCurrentIsoDate:
    """Test get_current_iso_date"""

    def test_format(self):
        """Test millisecond precision and Z suffix"""
        value = get_current_iso_date()
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", value)

    def test_is_now(self):
        """Test the timestamp is the current UTC time"""
        value = get_current_iso_date()
        parsed = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ").replace(tzinfo=timezone.utc)
        assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 5
