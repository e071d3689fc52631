"""
Inflation term structures used to forecast index fixings.

Provides:
- ZeroInflationCurve: zero-coupon inflation rates z(T) such that the index
  level at T is I(T) = I(base) * (1 + z(T))^T
- YoYInflationCurve: year-on-year inflation rates y(T)

Both curves are anchored at a base date, which for a zero curve must be a
date whose index fixing is already known, and are built from pillar dates
and rates. Rates between pillars are interpolated with the chosen
interpolation scheme. Dates after the last pillar raise an error unless
extrapolation is requested, in which case the last rate is held flat.

Rates are looked up at the start of the inflation period containing the
(lagged) date unless the curve is built for an interpolated index, in which
case the lagged date itself is used.

Example:
    >>> zero_curve = ZeroInflationCurve(
    ...     base_dt=Date(1, 1, 2024),
    ...     pillar_dts=[Date(1, 1, 2025), Date(1, 1, 2029)],
    ...     rates=[0.030, 0.028],
    ...     frequency=FrequencyTypes.MONTHLY,
    ...     observation_lag="3M"
    ... )
    >>> zero_curve.zero_rate(Date(1, 6, 2026))
    >>>
    >>> curve_handle = Handle(zero_curve)
"""

import numpy as np

from inflix.utils.date import Date
from inflix.utils.day_count import DayCount, DayCountTypes
from inflix.utils.error import LibError
from inflix.utils.frequency import FrequencyTypes
from inflix.utils.helpers import (check_argument_types, label_to_string,
                                  format_table)
from inflix.utils.inflation_period import inflation_period
from inflix.utils.observer import Observable
from inflix.market.curves.interpolator import InterpTypes, Interpolator


###############################################################################


class InflationCurve(Observable):
    """
    Base class of inflation term structures.

    Holds the base date, observation lag, reporting frequency and day count
    shared by zero and year-on-year curves, and the rate interpolation.
    """

    def __init__(self,
                 base_dt: Date,
                 pillar_dts: list,
                 rates: (list, np.ndarray),
                 frequency: FrequencyTypes,
                 observation_lag: str,
                 dc_type: DayCountTypes,
                 interp_type: InterpTypes,
                 index_interpolated: bool):

        Observable.__init__(self)

        if len(pillar_dts) != len(rates):
            raise LibError("Pillar dates and rates must have same length")

        if len(pillar_dts) == 0:
            raise LibError("Need at least one pillar to build a curve")

        for dt in pillar_dts:
            if dt < base_dt:
                raise LibError("Pillar date " + str(dt) +
                               " is before base date " + str(base_dt))

        self._base_dt = base_dt
        self._pillar_dts = list(pillar_dts)
        self._rates = np.array(rates, dtype=np.float64)
        self._frequency = frequency
        self._observation_lag = observation_lag
        self._dc_type = dc_type
        self._interp_type = interp_type
        self._index_interpolated = index_interpolated

        # validates the lag
        base_dt.add_tenor(observation_lag)

        self._times = np.array([self.time_from_base(dt)
                                for dt in self._pillar_dts])

        self._interpolator = Interpolator(interp_type)
        self._interpolator.fit(self._times, self._rates)

    ###########################################################################

    def base_dt(self):
        return self._base_dt

    def max_dt(self):
        return self._pillar_dts[-1]

    def observation_lag(self):
        return self._observation_lag

    def frequency(self):
        return self._frequency

    def day_counter(self):
        return self._dc_type

    def interpolation_type(self):
        return self._interp_type

    def time_from_base(self, dt: Date):
        return DayCount(self._dc_type).year_frac(self._base_dt, dt)[0]

    ###########################################################################

    def _rate(self,
              dt: Date,
              extra_lag: str,
              extrapolate: bool):
        """ Interpolated curve rate for dt shifted back by extra_lag. """

        use_dt = dt.sub_tenor(extra_lag)

        if self._index_interpolated is False:
            use_dt = inflation_period(use_dt, self._frequency)[0]

        if use_dt < self._base_dt:
            raise LibError("Date " + str(use_dt) + " is before curve base date " +
                           str(self._base_dt))

        if extrapolate is False and use_dt > self.max_dt():
            raise LibError("Date " + str(use_dt) + " is after curve max date " +
                           str(self.max_dt()))

        return self._interpolator.interpolate(self.time_from_base(use_dt))

    ###########################################################################

    def print_table(self):
        """ Print the curve pillars as a table. """
        header = ["PILLAR_DT", "TIME", "RATE_BPS"]
        rows = []
        for dt, t, r in zip(self._pillar_dts, self._times, self._rates):
            rows.append([dt, round(t, 4), round(r * 10000, 2)])

        print(format_table(header, rows))

    ###########################################################################

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("BASE DATE", self._base_dt)
        s += label_to_string("OBSERVATION LAG", self._observation_lag)
        s += label_to_string("FREQUENCY", self._frequency)
        s += label_to_string("DAY COUNT", self._dc_type)
        s += label_to_string("INTERP TYPE", self._interp_type)
        s += label_to_string("NUM PILLARS", len(self._pillar_dts), "")
        return s

###############################################################################


class ZeroInflationCurve(InflationCurve):
    """
    Zero-coupon inflation curve.

    A zero rate z(T) read off this curve implies the index level
    I(T) = I(base) * (1 + z(T))^t(base, T).
    """

    def __init__(self,
                 base_dt: Date,
                 pillar_dts: list,
                 rates: (list, np.ndarray),
                 frequency: FrequencyTypes = FrequencyTypes.MONTHLY,
                 observation_lag: str = "0D",
                 dc_type: DayCountTypes = DayCountTypes.ACT_365F,
                 interp_type: InterpTypes = InterpTypes.LINEAR):

        check_argument_types(self.__init__, locals())

        super().__init__(base_dt, pillar_dts, rates, frequency,
                         observation_lag, dc_type, interp_type, False)

    ###########################################################################

    @classmethod
    def from_index_levels(cls,
                          base_dt: Date,
                          base_index: float,
                          pillar_dts: list,
                          index_levels: list,
                          frequency: FrequencyTypes = FrequencyTypes.MONTHLY,
                          observation_lag: str = "0D",
                          dc_type: DayCountTypes = DayCountTypes.ACT_365F,
                          interp_type: InterpTypes = InterpTypes.LINEAR):
        """ Build a zero curve that reproduces projected index levels. Each
        level I(T) gives the zero rate (I(T) / I(base))^(1/T) - 1. """

        if base_index <= 0.0:
            raise LibError("Base index must be positive")

        if len(pillar_dts) != len(index_levels):
            raise LibError("Pillar dates and index levels must have same length")

        day_counter = DayCount(dc_type)
        rates = []
        for dt, level in zip(pillar_dts, index_levels):
            if level <= 0.0:
                raise LibError("Index levels must be positive")
            t = day_counter.year_frac(base_dt, dt)[0]
            if t <= 0.0:
                raise LibError("Pillar date " + str(dt) +
                               " must be after base date " + str(base_dt))
            rates.append((level / base_index) ** (1.0 / t) - 1.0)

        return cls(base_dt, pillar_dts, rates, frequency, observation_lag,
                   dc_type, interp_type)

    ###########################################################################

    def zero_rate(self,
                  dt: Date,
                  extra_lag: str = "0D",
                  extrapolate: bool = False):
        """ Zero inflation rate for the period containing dt - extra_lag. """
        return self._rate(dt, extra_lag, extrapolate)

###############################################################################


class YoYInflationCurve(InflationCurve):
    """
    Year-on-year inflation curve.

    The rate at T is the forecast of the annual inflation rate fixing at T.
    Set index_interpolated to match the index being forecast: a flat index
    reads the curve at the start of each inflation period.
    """

    def __init__(self,
                 base_dt: Date,
                 pillar_dts: list,
                 rates: (list, np.ndarray),
                 frequency: FrequencyTypes = FrequencyTypes.MONTHLY,
                 observation_lag: str = "0D",
                 dc_type: DayCountTypes = DayCountTypes.ACT_365F,
                 interp_type: InterpTypes = InterpTypes.LINEAR,
                 index_interpolated: bool = False):

        check_argument_types(self.__init__, locals())

        super().__init__(base_dt, pillar_dts, rates, frequency,
                         observation_lag, dc_type, interp_type,
                         index_interpolated)

    ###########################################################################

    def yoy_rate(self,
                 dt: Date,
                 extra_lag: str = "0D",
                 extrapolate: bool = False):
        """ Year-on-year inflation rate at dt - extra_lag. """
        return self._rate(dt, extra_lag, extrapolate)

###############################################################################
