##############################################################################

##############################################################################

"""
Calendar date class used throughout the inflix library.

A Date is an immutable day/month/year triple with a cached Excel-style
serial number (_excel_dt) that gives fast ordering, differencing and
hashing. Inflation arithmetic is done in whole calendar days so there is no
intraday component.

Supported operations:
- Arithmetic: add_days, add_weekdays, add_months, add_years, add_tenor
- Differences: d2 - d1 gives the number of calendar days
- Comparisons and hashing (dates can be dict keys)
- Month helpers: eom, is_eom, first_of_month

Tenor strings are an integer followed by D, W, M or Y and may carry a sign,
e.g. "3M", "-1Y", "0D".

Example:
    >>> dt = Date(15, 1, 2024)
    >>> dt.add_tenor("3M")
    15-APR-2024
    >>> dt.add_tenor("-1Y")
    15-JAN-2023
    >>> Date(1, 3, 2024) - Date(1, 2, 2024)
    29
"""

import datetime

from .error import LibError

###############################################################################

SHORT_MONTH_NAMES = ['JAN', 'FEB', 'MAR', 'APR', 'MAY', 'JUN',
                     'JUL', 'AUG', 'SEP', 'OCT', 'NOV', 'DEC']

MONTH_DAYS_NOT_LEAP = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
MONTH_DAYS_LEAP = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

_EXCEL_EPOCH = datetime.date(1899, 12, 30).toordinal()

###############################################################################


def is_leap_year(y: int):
    """ Test whether year y is a leap year - if so return True, else False """
    leap_year = ((y % 4 == 0) and (y % 100 != 0) or (y % 400 == 0))
    return leap_year

###############################################################################


def days_in_month(m: int, y: int):
    """ Number of days in month m of year y. """
    if is_leap_year(y):
        return MONTH_DAYS_LEAP[m - 1]
    return MONTH_DAYS_NOT_LEAP[m - 1]

###############################################################################


def parse_tenor(tenor: str):
    """ Split a signed tenor string such as '-3M' into (3 * -1, 'M'). """

    if isinstance(tenor, str) is False:
        raise LibError("Tenor must be a string e.g. '5Y'")

    tenor = tenor.strip().upper()

    sign = 1
    if tenor.startswith("-"):
        sign = -1
        tenor = tenor[1:]
    elif tenor.startswith("+"):
        tenor = tenor[1:]

    if len(tenor) < 2:
        raise LibError("Tenor must be a number followed by D, W, M or Y")

    period_type = tenor[-1]
    if period_type not in ("D", "W", "M", "Y"):
        raise LibError("Unknown tenor type in " + tenor)

    try:
        num_periods = int(tenor[:-1])
    except ValueError:
        raise LibError("Unable to parse tenor " + tenor) from None

    return sign * num_periods, period_type

###############################################################################


def negate_tenor(tenor: str):
    """ Flip the sign of a tenor string, '3M' becomes '-3M'. """
    num_periods, period_type = parse_tenor(tenor)
    return str(-num_periods) + period_type

###############################################################################


class Date():
    """ A date class to manage dates that is simple to use and includes a
    number of useful date functions used frequently in finance. """

    def __init__(self,
                 d: int,
                 m: int,
                 y: int):
        """ Create a date given a day of month, month and year. The arguments
        must be in the order day (of month), month number and then the year.
        The year must be a 4-digit number greater than or equal to 1900. """

        if y < 1900:
            raise LibError("Year cannot be before 1900")

        if m < 1 or m > 12:
            raise LibError("Month " + str(m) + " is not valid")

        if d < 1 or d > days_in_month(m, y):
            raise LibError("Day " + str(d) + " is not valid for month " +
                           str(m) + " of " + str(y))

        self._d = d
        self._m = m
        self._y = y

        self._excel_dt = datetime.date(y, m, d).toordinal() - _EXCEL_EPOCH
        self._weekday = (self._excel_dt + 5) % 7

    ###########################################################################

    @classmethod
    def from_excel(cls, excel_dt: int):
        """ Build a date from its Excel serial number. """
        dt = datetime.date.fromordinal(int(excel_dt) + _EXCEL_EPOCH)
        return cls(dt.day, dt.month, dt.year)

    @classmethod
    def from_date(cls, dt):
        """ Build a date from a datetime.date or datetime.datetime. """
        return cls(dt.day, dt.month, dt.year)

    ###########################################################################

    def d(self):
        return self._d

    def m(self):
        return self._m

    def y(self):
        return self._y

    def weekday(self):
        """ Day of week with Monday = 0 and Sunday = 6. """
        return self._weekday

    def datetime(self):
        """ Returns a datetime.date of the date """
        return datetime.date(self._y, self._m, self._d)

    ###########################################################################

    def __lt__(self, other):
        return self._excel_dt < other._excel_dt

    def __gt__(self, other):
        return self._excel_dt > other._excel_dt

    def __le__(self, other):
        return self._excel_dt <= other._excel_dt

    def __ge__(self, other):
        return self._excel_dt >= other._excel_dt

    def __eq__(self, other):
        if isinstance(other, Date) is False:
            return NotImplemented
        return self._excel_dt == other._excel_dt

    def __ne__(self, other):
        if isinstance(other, Date) is False:
            return NotImplemented
        return self._excel_dt != other._excel_dt

    def __hash__(self):
        return hash(self._excel_dt)

    def __sub__(self, other):
        """ Number of calendar days from other to self. """
        if isinstance(other, Date) is False:
            raise LibError("Can only subtract a Date from a Date")
        return self._excel_dt - other._excel_dt

    ###########################################################################

    def is_weekend(self):
        """ returns True if the date falls on a weekend. """
        return self._weekday >= 5

    def is_eom(self):
        """ returns True if this date falls on a month end. """
        return self._d == days_in_month(self._m, self._y)

    def eom(self):
        """ returns last date of month of this date. """
        return Date(days_in_month(self._m, self._y), self._m, self._y)

    def first_of_month(self):
        """ returns the first date of the month of this date. """
        return Date(1, self._m, self._y)

    ###########################################################################

    def add_days(self,
                 num_days: int = 1):
        """ Returns a new date that is num_days after the Date. I also make
        it possible to go backwards a number of days. """
        return Date.from_excel(self._excel_dt + int(num_days))

    ###########################################################################

    def add_weekdays(self,
                     num_days: int):
        """ Returns a new date that is num_days working days after Date. Note
        that only weekends are taken into account. Other Holidays are not. If
        you want to include regional holidays use add_business_days from the
        Calendar class. """

        step = 1 if num_days >= 0 else -1
        num_days = abs(num_days)

        dt = self
        while num_days > 0:
            dt = dt.add_days(step)
            if dt.is_weekend() is False:
                num_days -= 1

        return dt

    ###########################################################################

    def add_months(self,
                   num_months: int):
        """ Returns a new date that is num_months after the Date. If the
        day of month does not exist in the new month the date is set to the
        last day of that month. """

        if isinstance(num_months, int) is False:
            raise LibError("Number of months must be an integer")

        mm = self._m + num_months
        yy = self._y + (mm - 1) // 12
        mm = (mm - 1) % 12 + 1

        dd = min(self._d, days_in_month(mm, yy))
        return Date(dd, mm, yy)

    ###########################################################################

    def add_years(self,
                  num_years: int):
        """ Returns a new date that is num_years after the Date. """
        return self.add_months(12 * num_years)

    ###########################################################################

    def add_tenor(self,
                  tenor: str):
        """ Return the date following the Date by a period given by the
        tenor which is a string consisting of a number and a letter, the
        letter being d, w, m , y for day, week, month or year. This is case
        independent. For example 10Y means 10 years while 120m also means 10
        years. A leading minus sign moves the date backwards. """

        num_periods, period_type = parse_tenor(tenor)

        if period_type == "D":
            return self.add_days(num_periods)
        elif period_type == "W":
            return self.add_days(7 * num_periods)
        elif period_type == "M":
            return self.add_months(num_periods)
        else:
            return self.add_years(num_periods)

    ###########################################################################

    def sub_tenor(self,
                  tenor: str):
        """ Return the date that precedes the Date by the tenor. """
        return self.add_tenor(negate_tenor(tenor))

    ###########################################################################

    def __repr__(self):
        """ returns a formatted string of the date """
        return "%02d-%s-%04d" % (self._d, SHORT_MONTH_NAMES[self._m - 1],
                                 self._y)

    def _print(self):
        """ prints formatted string of the date. """
        print(self)

###############################################################################
