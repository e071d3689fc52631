"""
Inflation period resolution.

An inflation index publishes one value per reporting period. The period
containing a date is the closed interval [first, last] of calendar days
sharing that published value, where last + 1 day is the first day of the
next period. Periods are aligned to the calendar year: a QUARTERLY index
has periods Jan-Mar, Apr-Jun, Jul-Sep and Oct-Dec.

Example:
    >>> inflation_period(Date(15, 5, 2024), FrequencyTypes.QUARTERLY)
    (01-APR-2024, 30-JUN-2024)
    >>> inflation_period(Date(15, 5, 2024), FrequencyTypes.MONTHLY)
    (01-MAY-2024, 31-MAY-2024)
"""

from .date import Date
from .day_count import DayCount, DayCountTypes
from .error import LibError
from .frequency import FrequencyTypes, months_in_period

###############################################################################


def inflation_period(dt: Date,
                     freq_type: FrequencyTypes):
    """ Return the (first, last) dates of the reporting period containing
    dt. """

    if isinstance(freq_type, FrequencyTypes) is False:
        raise LibError("Frequency must be a FrequencyTypes")

    if freq_type == FrequencyTypes.ZERO:
        raise LibError("Frequency not handled: " + str(freq_type))

    num_months = months_in_period(freq_type)

    start_month = num_months * ((dt.m() - 1) // num_months) + 1
    end_month = start_month + num_months - 1

    first_dt = Date(1, start_month, dt.y())
    last_dt = Date(1, end_month, dt.y()).eom()

    return (first_dt, last_dt)

###############################################################################


def inflation_year_fraction(freq_type: FrequencyTypes,
                            interpolated: bool,
                            dc_type: DayCountTypes,
                            dt1: Date,
                            dt2: Date):
    """ Time between two dates as seen by an inflation index. An interpolated
    index moves daily so the day count is applied to the dates themselves. A
    flat index is constant over each period so the time is measured between
    the starts of the two periods. """

    day_counter = DayCount(dc_type)

    if interpolated is True:
        return day_counter.year_frac(dt1, dt2)[0]

    period1 = inflation_period(dt1, freq_type)
    period2 = inflation_period(dt2, freq_type)
    return day_counter.year_frac(period1[0], period2[0])[0]

###############################################################################
