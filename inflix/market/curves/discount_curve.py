"""
Discount curve built from pillar dates and discount factors.

The curve converts each discount factor to a continuously compounded zero
rate r(t) = -ln(df) / t and interpolates the zero rates. Beyond the last
pillar the last zero rate is held flat.

Example:
    >>> curve = DiscountCurve(Date(1, 1, 2024),
    ...                       [Date(1, 1, 2025), Date(1, 1, 2029)],
    ...                       [0.96, 0.82])
    >>> curve.df(Date(1, 7, 2026))
"""

import numpy as np

from inflix.utils.date import Date
from inflix.utils.day_count import DayCount, DayCountTypes
from inflix.utils.error import LibError
from inflix.utils.global_vars import g_small
from inflix.utils.helpers import check_argument_types, label_to_string
from inflix.market.curves.interpolator import InterpTypes, Interpolator

###############################################################################


class DiscountCurve:
    """ Curve of discount factors anchored at a value date. """

    def __init__(self,
                 value_dt: Date,
                 df_dts: list,
                 df_values: (list, np.ndarray),
                 interp_type: InterpTypes = InterpTypes.LINEAR,
                 dc_type: DayCountTypes = DayCountTypes.ACT_365F):

        check_argument_types(self.__init__, locals())

        if len(df_dts) != len(df_values):
            raise LibError("Dates and discount factors must have same length")

        if len(df_dts) == 0:
            raise LibError("Need at least one discount factor")

        self._value_dt = value_dt
        self._df_dts = list(df_dts)
        self._dfs = np.array(df_values, dtype=np.float64)
        self._interp_type = interp_type
        self._dc_type = dc_type

        if np.any(self._dfs <= 0.0):
            raise LibError("Discount factors must be positive")

        self._times = np.array([self._time(dt) for dt in self._df_dts])

        if np.any(self._times < 0.0):
            raise LibError("Discount curve dates must not be before value date")

        # a pillar at time zero carries no zero rate
        keep = self._times > g_small
        if not np.any(keep):
            raise LibError("Need at least one pillar after the value date")

        zero_rates = -np.log(self._dfs[keep]) / self._times[keep]

        self._interpolator = Interpolator(interp_type)
        self._interpolator.fit(self._times[keep], zero_rates)

    ###########################################################################

    def _time(self, dt: Date):
        return DayCount(self._dc_type).year_frac(self._value_dt, dt)[0]

    def value_dt(self):
        return self._value_dt

    ###########################################################################

    def zero_rate(self, dt: Date):
        """ Continuously compounded zero rate to dt. """
        t = self._time(dt)
        return self._interpolator.interpolate(max(t, g_small))

    def df(self, dt: Date):
        """ Discount factor from the value date to dt. """
        t = self._time(dt)
        if t < 0.0:
            raise LibError("Date " + str(dt) + " is before curve date " +
                           str(self._value_dt))
        if t < g_small:
            return 1.0
        return float(np.exp(-self.zero_rate(dt) * t))

    ###########################################################################

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("VALUATION DATE", self._value_dt)
        s += label_to_string("INTERP TYPE", self._interp_type)
        s += label_to_string("DAY COUNT", self._dc_type)
        s += label_to_string("DATES", self._df_dts, list_format=True)
        s += label_to_string("DFS", list(self._dfs), "", list_format=True)
        return s

###############################################################################
