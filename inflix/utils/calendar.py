##############################################################################

##############################################################################

"""
Business day calendars and date adjustment conventions.

Inflation indices are not tied to a trading calendar, so the library needs
only two calendars:
- NONE: every day is a business day (the fixing calendar of every index)
- WEEKEND: Saturdays and Sundays are holidays

Adjustment conventions follow ISDA: FOLLOWING, MODIFIED_FOLLOWING,
PRECEDING, MODIFIED_PRECEDING and NONE.

Example:
    >>> cal = Calendar(CalendarTypes.WEEKEND)
    >>> cal.adjust(Date(1, 6, 2024), BusDayAdjustTypes.FOLLOWING)
    03-JUN-2024
    >>> null_cal = Calendar(CalendarTypes.NONE)
    >>> null_cal.advance(Date(29, 2, 2024), "-1Y",
    ...                  BusDayAdjustTypes.MODIFIED_FOLLOWING)
    28-FEB-2023
"""

from enum import Enum

from .date import Date, parse_tenor
from .error import LibError

###############################################################################


class BusDayAdjustTypes(Enum):
    NONE = 1
    FOLLOWING = 2
    MODIFIED_FOLLOWING = 3
    PRECEDING = 4
    MODIFIED_PRECEDING = 5

###############################################################################


class CalendarTypes(Enum):
    NONE = 1
    WEEKEND = 2

###############################################################################


class Calendar:
    """ Class to manage designation of payment dates as holidays according to
    a calendar type. """

    def __init__(self,
                 cal_type: CalendarTypes):
        """ Create a calendar based on a specified calendar type. """

        if isinstance(cal_type, CalendarTypes) is False:
            raise LibError("Need to pass CalendarTypes and not " +
                           str(cal_type))

        self._cal_type = cal_type

    ###########################################################################

    def is_business_day(self,
                        dt: Date):
        """ Determines if a date is a business day according to the specified
        calendar. If it is it returns True, otherwise False. """

        if self._cal_type == CalendarTypes.NONE:
            return True

        return dt.is_weekend() is False

    ###########################################################################

    def adjust(self,
               dt: Date,
               bd_type: BusDayAdjustTypes):
        """ Adjust a payment date if it falls on a holiday date based on the
        calendar type and the business day convention. """

        if isinstance(bd_type, BusDayAdjustTypes) is False:
            raise LibError("Invalid type passed. Need BusDayAdjustTypes")

        if bd_type == BusDayAdjustTypes.NONE:
            return dt

        elif bd_type == BusDayAdjustTypes.FOLLOWING:

            while self.is_business_day(dt) is False:
                dt = dt.add_days(1)

            return dt

        elif bd_type == BusDayAdjustTypes.MODIFIED_FOLLOWING:

            m_start = dt.m()
            new_dt = self.adjust(dt, BusDayAdjustTypes.FOLLOWING)

            # roll back if we crossed into the next month
            if new_dt.m() != m_start:
                new_dt = self.adjust(dt, BusDayAdjustTypes.PRECEDING)

            return new_dt

        elif bd_type == BusDayAdjustTypes.PRECEDING:

            while self.is_business_day(dt) is False:
                dt = dt.add_days(-1)

            return dt

        elif bd_type == BusDayAdjustTypes.MODIFIED_PRECEDING:

            m_start = dt.m()
            new_dt = self.adjust(dt, BusDayAdjustTypes.PRECEDING)

            if new_dt.m() != m_start:
                new_dt = self.adjust(dt, BusDayAdjustTypes.FOLLOWING)

            return new_dt

        else:
            raise LibError("Unknown adjustment convention" + str(bd_type))

    ###########################################################################

    def add_business_days(self,
                          dt: Date,
                          num_days: int):
        """ Returns a new date that is num_days business days after Date.
        All holidays in the chosen calendar are assumed not business days. """

        if isinstance(num_days, int) is False:
            raise LibError("Num days must be an integer")

        step = 1 if num_days >= 0 else -1
        num_days = abs(num_days)

        while num_days > 0:
            dt = dt.add_days(step)
            if self.is_business_day(dt) is True:
                num_days -= 1

        return dt

    ###########################################################################

    def advance(self,
                dt: Date,
                tenor: str,
                bd_type: BusDayAdjustTypes = BusDayAdjustTypes.FOLLOWING):
        """ Move a date by a signed tenor. Day tenors count business days;
        week, month and year tenors move calendar time and then adjust the
        result with the business day convention. """

        num_periods, period_type = parse_tenor(tenor)

        if period_type == "D":
            return self.add_business_days(dt, num_periods)

        return self.adjust(dt.add_tenor(tenor), bd_type)

    ###########################################################################

    def __repr__(self):
        return self._cal_type.name

###############################################################################
