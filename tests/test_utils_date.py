"""
Test suite for inflix.utils.date module
Tests Date class functionality including arithmetic, formatting, and tenor operations
"""
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import datetime

import pytest
from inflix.utils.date import Date, parse_tenor, negate_tenor, days_in_month
from inflix.utils.error import LibError


class TestDate:
    """Test cases for Date class"""

    def test_date_creation(self):
        """Test basic construction"""
        d1 = Date(15, 6, 2024)
        assert d1.d() == 15
        assert d1.m() == 6
        assert d1.y() == 2024

    def test_date_string_representation(self):
        """Test string representation of dates"""
        assert str(Date(1, 1, 2024)) == "01-JAN-2024"
        assert repr(Date(15, 6, 2024)) == "15-JUN-2024"

    def test_date_comparison(self):
        """Test date comparison operations"""
        d1 = Date(1, 6, 2024)
        d2 = Date(2, 6, 2024)
        d3 = Date(1, 6, 2024)

        assert d1 < d2
        assert d2 > d1
        assert d1 == d3
        assert d1 <= d3
        assert d1 >= d3
        assert d1 != d2
        assert d1 != None  # noqa: E711

    def test_dates_usable_as_dict_keys(self):
        """Equal dates hash equally"""
        fixings = {Date(1, 1, 2024): 200.0}
        assert fixings[Date(1, 1, 2024)] == 200.0

    def test_date_arithmetic(self):
        """Test date arithmetic operations"""
        d = Date(15, 6, 2024)

        d_plus_10 = d.add_days(10)
        assert d_plus_10 == Date(25, 6, 2024)

        d_minus_5 = d.add_days(-5)
        assert d_minus_5 == Date(10, 6, 2024)

        assert d_plus_10 - d == 10
        assert d_minus_5 - d == -5

    def test_add_months(self):
        """Test adding months to dates"""
        d = Date(15, 6, 2024)

        assert d.add_months(1) == Date(15, 7, 2024)
        assert d.add_months(12) == Date(15, 6, 2025)
        assert d.add_months(-6) == Date(15, 12, 2023)

        # Month-end handling clamps to the last day of the month
        assert Date(31, 1, 2024).add_months(1) == Date(29, 2, 2024)
        assert Date(31, 1, 2023).add_months(1) == Date(28, 2, 2023)

    def test_add_months_requires_integer(self):
        """Fractional months are rejected"""
        with pytest.raises(LibError):
            Date(15, 6, 2024).add_months(1.5)

    def test_add_years(self):
        """Test adding years to dates"""
        assert Date(29, 2, 2024).add_years(1) == Date(28, 2, 2025)
        assert Date(29, 2, 2024).add_years(-1) == Date(28, 2, 2023)
        assert Date(15, 6, 2024).add_years(10) == Date(15, 6, 2034)

    def test_add_weekdays(self):
        """Test adding weekdays (business days)"""
        d = Date(3, 6, 2024)  # June 3, 2024 is a Monday
        assert d.weekday() == 0

        assert d.add_weekdays(1) == Date(4, 6, 2024)
        assert d.add_weekdays(5) == Date(10, 6, 2024)
        assert d.add_weekdays(-1) == Date(31, 5, 2024)

    def test_add_tenor(self):
        """Test adding tenor strings to dates"""
        d = Date(15, 6, 2024)

        test_tenors = [
            ("1D", Date(16, 6, 2024)),
            ("1W", Date(22, 6, 2024)),
            ("1M", Date(15, 7, 2024)),
            ("3m", Date(15, 9, 2024)),
            ("1Y", Date(15, 6, 2025)),
            ("-3M", Date(15, 3, 2024)),
            ("0D", Date(15, 6, 2024)),
        ]

        for tenor, expected in test_tenors:
            assert d.add_tenor(tenor) == expected, f"Failed for tenor {tenor}"

    def test_sub_tenor(self):
        """Subtracting a tenor is adding its negation"""
        d = Date(16, 4, 2024)
        assert d.sub_tenor("3M") == Date(16, 1, 2024)
        assert d.sub_tenor("-1M") == Date(16, 5, 2024)
        assert d.sub_tenor("0D") == d

    def test_parse_tenor(self):
        """Tenor strings parse into a signed count and a unit"""
        assert parse_tenor("3M") == (3, "M")
        assert parse_tenor("-1y") == (-1, "Y")
        assert parse_tenor("10D") == (10, "D")
        assert negate_tenor("3M") == "-3M"
        assert negate_tenor("-2W") == "2W"

    def test_invalid_tenor(self):
        """Malformed tenors are rejected"""
        with pytest.raises(LibError):
            Date(15, 6, 2024).add_tenor("3Q")

        with pytest.raises(LibError):
            Date(15, 6, 2024).add_tenor("M")

    def test_invalid_dates(self):
        """Test handling of invalid date inputs"""
        with pytest.raises(LibError):
            Date(32, 1, 2024)

        with pytest.raises(LibError):
            Date(15, 13, 2024)

        with pytest.raises(LibError):
            Date(29, 2, 2023)

        with pytest.raises(LibError):
            Date(1, 1, 1899)

    def test_month_helpers(self):
        """First and last day of the month"""
        d = Date(15, 2, 2024)
        assert d.first_of_month() == Date(1, 2, 2024)
        assert d.eom() == Date(29, 2, 2024)
        assert d.eom().is_eom() is True
        assert d.is_eom() is False
        assert days_in_month(2, 2023) == 28

    def test_year_boundaries(self):
        """Test date operations across year boundaries"""
        d = Date(31, 12, 2023)
        assert d.add_days(1) == Date(1, 1, 2024)
        assert Date(1, 1, 2024).add_days(-1) == d

    def test_excel_and_datetime_conversion(self):
        """Dates convert to and from serial numbers and datetime.date"""
        d = Date(15, 6, 2024)
        assert Date.from_excel(d._excel_dt) == d
        assert d.datetime() == datetime.date(2024, 6, 15)
        assert Date.from_date(datetime.date(2024, 6, 15)) == d
        assert Date(1, 1, 1900)._excel_dt == 2

    def test_weekend(self):
        """Saturday and Sunday are weekend days"""
        assert Date(1, 6, 2024).is_weekend() is True
        assert Date(2, 6, 2024).is_weekend() is True
        assert Date(3, 6, 2024).is_weekend() is False
