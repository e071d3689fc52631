##############################################################################

##############################################################################

"""
Day count conventions for converting date intervals to year fractions.

Supported conventions:
- ACT_365F: actual days / 365
- ACT_360: actual days / 360
- ACT_ACT_ISDA: days in leap years / 366 plus days in other years / 365
- THIRTY_360_BOND: 30/360 bond basis

year_frac returns the tuple (acc_factor, numerator, denominator) so that
callers can report the day counts as well as the fraction.

Example:
    >>> dc = DayCount(DayCountTypes.ACT_365F)
    >>> acc_factor, num, den = dc.year_frac(Date(1, 1, 2024), Date(1, 1, 2025))
    >>> num, den
    (366, 365)
"""

from enum import Enum

from .date import Date, is_leap_year
from .error import LibError

###############################################################################


class DayCountTypes(Enum):
    ZERO = 0
    THIRTY_360_BOND = 1
    ACT_ACT_ISDA = 5
    ACT_360 = 9
    ACT_365F = 10

###############################################################################


class DayCount:
    """ Calculate the fractional day count between two dates according to a
    specified day count convention. """

    def __init__(self,
                 dcc_type: DayCountTypes):
        """ Create Day Count convention by passing in the Day Count Type. """

        if isinstance(dcc_type, DayCountTypes) is False:
            raise LibError("Need to pass DayCountTypes")

        self._type = dcc_type

    ###########################################################################

    def year_frac(self,
                  dt1: Date,
                  dt2: Date):
        """ Calculate the year fraction between dates dt1 and dt2 using the
        specified day count convention. A negative fraction is returned when
        dt2 is before dt1. """

        if dt2 < dt1:
            (acc_factor, num, den) = self.year_frac(dt2, dt1)
            return (-acc_factor, -num, den)

        if self._type == DayCountTypes.ACT_365F:

            num = dt2 - dt1
            den = 365
            return (num / den, num, den)

        elif self._type == DayCountTypes.ACT_360:

            num = dt2 - dt1
            den = 360
            return (num / den, num, den)

        elif self._type == DayCountTypes.ACT_ACT_ISDA:

            y1 = dt1.y()
            y2 = dt2.y()
            num = dt2 - dt1

            if y1 == y2:
                den = 366 if is_leap_year(y1) else 365
                return (num / den, num, den)

            denom1 = 366 if is_leap_year(y1) else 365
            denom2 = 366 if is_leap_year(y2) else 365

            num1 = Date(1, 1, y1 + 1) - dt1
            num2 = dt2 - Date(1, 1, y2)
            acc_factor = num1 / denom1 + num2 / denom2 + (y2 - y1 - 1)
            return (acc_factor, num, denom1)

        elif self._type == DayCountTypes.THIRTY_360_BOND:

            d1 = min(dt1.d(), 30)
            d2 = dt2.d()
            if d2 == 31 and d1 == 30:
                d2 = 30

            num = 360 * (dt2.y() - dt1.y()) + 30 * (dt2.m() - dt1.m()) + \
                (d2 - d1)
            den = 360
            return (num / den, num, den)

        elif self._type == DayCountTypes.ZERO:

            return (0.0, 0, 1)

        else:
            raise LibError(str(self._type) + " is not one of DayCountTypes")

    ###########################################################################

    def __repr__(self):
        """ Returns the calendar type as a string. """
        return str(self._type)

###############################################################################
