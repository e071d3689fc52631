"""
Inflation indices: historical fixings and forecasts.

Provides:
- InflationIndex: identity, reporting frequency, availability lag and
  interpolation flag shared by every inflation index
- ZeroInflationIndex: absolute index levels (e.g. UK RPI = 354.2)
- YoYInflationIndex: annual inflation rates, either read directly from a
  series of rates or derived as a ratio of index levels one year apart

Fixings are published once per inflation period and stored against every
calendar day of that period in the IndexManager. A fixing request for a
date is answered from history when the date is far enough in the past for
the value to have been published, and forecast from the linked inflation
term structure otherwise. Whether history can be trusted depends on the
evaluation date, read from Settings unless an explicit value_dt is given.

Interpolated indices move daily inside a period: the value is a linear
blend of the period's own fixing and the next period's fixing. This means
an interpolated fixing needs one more period of history than a flat one.

A missing historical fixing is always an error (MissingDataError); there is
no silent fallback to a forecast.

Example:
    >>> curve_handle = Handle()
    >>> ukrpi = ZeroInflationIndex(
    ...     family_name="RPI",
    ...     region=RegionTypes.UK,
    ...     revised=False,
    ...     interpolated=True,
    ...     frequency=FrequencyTypes.MONTHLY,
    ...     availability_lag="1M",
    ...     currency=CurrencyTypes.GBP,
    ...     zero_inflation=curve_handle
    ... )
    >>> ukrpi.add_fixing(Date(1, 1, 2024), 354.2)
    >>> ukrpi.add_fixing(Date(1, 2, 2024), 356.1)
    >>> ukrpi.fixing(Date(16, 1, 2024), value_dt=Date(15, 4, 2024))
    >>>
    >>> curve_handle.link_to(zero_curve)
    >>> ukrpi.fixing(Date(1, 6, 2026))
"""

import logging
from abc import ABC, abstractmethod

from inflix.utils.calendar import Calendar, CalendarTypes, BusDayAdjustTypes
from inflix.utils.currency import CurrencyTypes
from inflix.utils.date import Date
from inflix.utils.error import (LibError, MissingDataError,
                                UnboundTermStructureError,
                                UnanchorableForecastError)
from inflix.utils.frequency import FrequencyTypes, frequency_tenor
from inflix.utils.global_types import YoYFixingTypes, yoy_fixing_type
from inflix.utils.helpers import (check_argument_types, label_to_string,
                                  format_table)
from inflix.utils.inflation_period import (inflation_period,
                                           inflation_year_fraction)
from inflix.utils.observer import Handle, Observable, Observer
from inflix.utils.region import Region
from inflix.utils.settings import Settings
from inflix.market.fixings.index_manager import IndexManager

logger = logging.getLogger(__name__)

###############################################################################


class InflationIndex(Observable, Observer, ABC):
    """
    Base class of inflation indices.

    The display name is the region name followed by the family name, e.g.
    "UK RPI". The name is the key of the fixing history in the IndexManager
    so two indices with the same name share their fixings.

    The index observes the evaluation date and the notifier of its own
    fixing history, and forwards every notification to its observers.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 frequency: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes):

        check_argument_types(InflationIndex.__init__, locals())

        if frequency == FrequencyTypes.ZERO:
            raise LibError("Inflation index needs a reporting frequency")

        # validates the tenor
        Date(1, 1, 2000).sub_tenor(availability_lag)

        Observable.__init__(self)
        Observer.__init__(self)

        self._family_name = family_name
        self._region = region
        self._revised = revised
        self._interpolated = interpolated
        self._frequency = frequency
        self._availability_lag = availability_lag
        self._currency = currency

        self._name = region.name + " " + family_name

        self.register_with(Settings())
        self.register_with(IndexManager().notifier(self._name))

    ###########################################################################

    def name(self):
        return self._name

    def family_name(self):
        return self._family_name

    def region(self):
        return self._region

    def revised(self):
        return self._revised

    def interpolated(self):
        return self._interpolated

    def frequency(self):
        return self._frequency

    def availability_lag(self):
        return self._availability_lag

    def currency(self):
        return self._currency

    ###########################################################################

    def fixing_calendar(self):
        """ Inflation fixings are not tied to a trading calendar. """
        return Calendar(CalendarTypes.NONE)

    def is_valid_fixing_date(self, dt: Date):
        return self.fixing_calendar().is_business_day(dt)

    def time_series(self):
        return IndexManager().history(self._name)

    ###########################################################################

    def _period_fixings(self,
                        dt: Date,
                        value: float):
        """ Spread one published value over every day of its period. """

        first_dt, last_dt = inflation_period(dt, self._frequency)
        num_days = last_dt - first_dt + 1
        dates = [first_dt.add_days(i) for i in range(num_days)]
        return dates, [value] * num_days

    def add_fixing(self,
                   fixing_dt: Date,
                   fixing: float,
                   force_overwrite: bool = False):
        """ Publish the fixing of the inflation period containing fixing_dt.

        The value is stored against every day of the period. A different
        value already stored on any of those days raises
        RejectedOverwriteError unless force_overwrite is True. """

        dates, values = self._period_fixings(fixing_dt, fixing)
        IndexManager().add_fixings(self._name, dates, values, force_overwrite)

    def add_fixings(self,
                    fixing_dts: list,
                    fixings: list,
                    force_overwrite: bool = False):
        """ Publish several period fixings in one all-or-nothing update. """

        if len(fixing_dts) != len(fixings):
            raise LibError("Different number of fixing dates and fixings")

        all_dates = []
        all_values = []
        for dt, v in zip(fixing_dts, fixings):
            dates, values = self._period_fixings(dt, v)
            all_dates += dates
            all_values += values

        IndexManager().add_fixings(self._name, all_dates, all_values,
                                   force_overwrite)

    def clear_fixings(self):
        IndexManager().clear_history(self._name)

    ###########################################################################

    def update(self):
        self.notify_observers()

    ###########################################################################

    def _today(self,
               value_dt: Date = None):
        if value_dt is None:
            return Settings().evaluation_dt
        return value_dt

    def _anchor_fixing(self,
                       ts,
                       dt: Date):
        value = ts.get(dt)
        if value is None:
            raise MissingDataError(self._name, dt)
        return value

    def _interpolation_coefficient(self,
                                   dt: Date):
        """ Position of dt inside its inflation period, from 0 on the first
        day up to (n-1)/n on the last of n days. """
        first_dt, last_dt = inflation_period(dt, self._frequency)
        days_in_period = last_dt.add_days(1) - first_dt
        return (dt - first_dt) / days_in_period

    ###########################################################################

    @abstractmethod
    def fixing(self,
               fixing_dt: Date,
               value_dt: Date = None):
        """ Fixing of the index at fixing_dt, historical or forecast. """
        pass

    ###########################################################################

    def print_fixings(self):
        """ Print the stored period fixings as a table. """
        header = ["PERIOD_START", "PERIOD_END", "FIXING"]
        rows = []
        for dt, value in self.time_series():
            first_dt, last_dt = inflation_period(dt, self._frequency)
            if dt == first_dt:
                rows.append([first_dt, last_dt, value])

        print(self._name + " FIXINGS:")
        print(format_table(header, rows))

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("NAME", self._name)
        s += label_to_string("REGION", self._region.name)
        s += label_to_string("REVISED", self._revised)
        s += label_to_string("INTERPOLATED", self._interpolated)
        s += label_to_string("FREQUENCY", self._frequency)
        s += label_to_string("AVAILABILITY LAG", self._availability_lag)
        s += label_to_string("CURRENCY", self._currency)
        s += label_to_string("NUM FIXINGS", len(self.time_series()), "")
        return s

###############################################################################


class ZeroInflationIndex(InflationIndex):
    """
    Index of absolute price levels.

    Historical fixings are read from the fixing history. Fixings that cannot
    have been published yet are forecast by compounding the fixing at the
    term structure base date with the curve's zero inflation rate.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 frequency: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes,
                 zero_inflation: Handle = None):

        super().__init__(family_name, region, revised, interpolated,
                         frequency, availability_lag, currency)

        if zero_inflation is None:
            zero_inflation = Handle()

        if isinstance(zero_inflation, Handle) is False:
            raise LibError("Zero inflation term structure must be a Handle")

        self._zero_inflation = zero_inflation
        self.register_with(self._zero_inflation)

    ###########################################################################

    def zero_inflation_term_structure(self):
        return self._zero_inflation

    def _observation_lag(self):
        # without a linked curve the observation date is the fixing date
        if self._zero_inflation.empty():
            return "0D"
        return self._zero_inflation.current_link().observation_lag()

    ###########################################################################

    def needs_forecast(self,
                       fixing_dt: Date,
                       value_dt: Date = None):
        """ Whether the fixing at fixing_dt must come from the curve.

        Fixings of periods that ended before today minus the availability lag
        are known. Fixings needed after today cannot be known. In between,
        the history is checked for the month of the latest date needed. """

        today = self._today(value_dt)
        today_minus_lag = today.sub_tenor(self._availability_lag)

        historical_fixing_known = \
            inflation_period(today_minus_lag, self._frequency)[0].add_days(-1)

        latest_needed_dt = fixing_dt

        if self._interpolated is True:
            # the next period's fixing is needed too
            first_dt = inflation_period(fixing_dt, self._frequency)[0]
            if fixing_dt > first_dt:
                latest_needed_dt = \
                    fixing_dt.add_tenor(frequency_tenor(self._frequency))

        if latest_needed_dt <= historical_fixing_known:
            return False
        elif latest_needed_dt > today:
            return True
        else:
            first_of_month = latest_needed_dt.first_of_month()
            return self.time_series().get(first_of_month) is None

    ###########################################################################

    def fixing(self,
               fixing_dt: Date,
               value_dt: Date = None):
        """ Index level at fixing_dt, historical or forecast. """

        if self.needs_forecast(fixing_dt, value_dt) is True:
            logger.debug("%s fixing for %s is forecast", self._name, fixing_dt)
            return self.forecast_fixing(fixing_dt, value_dt)

        logger.debug("%s fixing for %s is historical", self._name, fixing_dt)

        first_dt, last_dt = inflation_period(fixing_dt, self._frequency)
        ts = self.time_series()

        i1 = self._anchor_fixing(ts, first_dt)

        if self._interpolated is True and fixing_dt > first_dt:

            i2 = self._anchor_fixing(ts, last_dt.add_days(1))

            # the interpolation fraction uses the observation date period
            observation_dt = fixing_dt.add_tenor(self._observation_lag())
            coeff = self._interpolation_coefficient(observation_dt)
            return i1 + (i2 - i1) * coeff

        return i1

    ###########################################################################

    def _forecast_level(self,
                        curve,
                        base_dt: Date,
                        base_fixing: float,
                        dt: Date):
        zero_rate = curve.zero_rate(dt, "0D", False)
        t = inflation_year_fraction(self._frequency, self._interpolated,
                                    curve.day_counter(), base_dt, dt)
        return base_fixing * (1.0 + zero_rate) ** t

    def forecast_fixing(self,
                        fixing_dt: Date,
                        value_dt: Date = None):
        """ Index level at fixing_dt implied by the zero inflation curve. """

        if self._zero_inflation.empty():
            raise UnboundTermStructureError(self._name)

        curve = self._zero_inflation.current_link()

        # the curve is relative to the fixing at its base date
        base_dt = curve.base_dt()
        if self.needs_forecast(base_dt, value_dt) is True:
            raise UnanchorableForecastError(self._name, base_dt)

        base_fixing = self.fixing(base_dt, value_dt)

        first_dt, last_dt = inflation_period(fixing_dt, self._frequency)

        i1 = self._forecast_level(curve, base_dt, base_fixing, first_dt)

        if self._interpolated is True and fixing_dt > first_dt:

            i2 = self._forecast_level(curve, base_dt, base_fixing,
                                      last_dt.add_days(1))

            observation_dt = fixing_dt.add_tenor(curve.observation_lag())
            coeff = self._interpolation_coefficient(observation_dt)
            return i1 + (i2 - i1) * coeff

        return i1

    ###########################################################################

    def clone(self,
              zero_inflation: Handle):
        """ Same index bound to another zero inflation term structure. """
        return ZeroInflationIndex(self._family_name,
                                  self._region,
                                  self._revised,
                                  self._interpolated,
                                  self._frequency,
                                  self._availability_lag,
                                  self._currency,
                                  zero_inflation)

    ###########################################################################

    def __repr__(self):
        s = super().__repr__()
        s += "\n" + label_to_string("HAS CURVE",
                                    self._zero_inflation.empty() is False, "")
        return s

###############################################################################


class YoYInflationIndex(InflationIndex):
    """
    Index of year-on-year inflation rates.

    If ratio is True the history holds index levels and the rate is
    I(t) / I(t - 1Y) - 1. Otherwise the history already holds annual rates.
    The ratio and interpolated flags are resolved once into a
    YoYFixingTypes value which selects the historical fixing method.
    """

    def __init__(self,
                 family_name: str,
                 region: Region,
                 revised: bool,
                 interpolated: bool,
                 ratio: bool,
                 frequency: FrequencyTypes,
                 availability_lag: str,
                 currency: CurrencyTypes,
                 yoy_inflation: Handle = None):

        super().__init__(family_name, region, revised, interpolated,
                         frequency, availability_lag, currency)

        if yoy_inflation is None:
            yoy_inflation = Handle()

        if isinstance(yoy_inflation, Handle) is False:
            raise LibError("YoY inflation term structure must be a Handle")

        self._ratio = ratio
        self._yoy_inflation = yoy_inflation
        self._fixing_type = yoy_fixing_type(ratio, interpolated)

        self._historical_fixing_fns = {
            YoYFixingTypes.RATIO_INTERPOLATED: self._ratio_interpolated_fixing,
            YoYFixingTypes.RATIO_FLAT: self._ratio_flat_fixing,
            YoYFixingTypes.LEVEL_INTERPOLATED: self._level_interpolated_fixing,
            YoYFixingTypes.LEVEL_FLAT: self._level_flat_fixing,
        }

        self.register_with(self._yoy_inflation)

    ###########################################################################

    def ratio(self):
        return self._ratio

    def fixing_type(self):
        return self._fixing_type

    def yoy_inflation_term_structure(self):
        return self._yoy_inflation

    ###########################################################################

    def needs_forecast(self,
                       fixing_dt: Date,
                       value_dt: Date = None):
        """ Fixings on or after the cut-off date are forecast. The cut-off is
        the start of the period containing today minus the availability lag,
        moved back one period for interpolated indices. """

        today = self._today(value_dt)
        today_minus_lag = today.sub_tenor(self._availability_lag)

        last_fix = \
            inflation_period(today_minus_lag, self._frequency)[0].add_days(-1)

        if self._interpolated is True:
            cutoff_dt = last_fix.add_days(1).sub_tenor(
                frequency_tenor(self._frequency))
        else:
            cutoff_dt = last_fix.add_days(1)

        return fixing_dt >= cutoff_dt

    ###########################################################################

    def fixing(self,
               fixing_dt: Date,
               value_dt: Date = None):
        """ Year-on-year rate at fixing_dt, historical or forecast. """

        if self.needs_forecast(fixing_dt, value_dt) is True:
            logger.debug("%s fixing for %s is forecast", self._name, fixing_dt)
            return self.forecast_fixing(fixing_dt)

        logger.debug("%s fixing for %s is historical using %s", self._name,
                     fixing_dt, self._fixing_type.name)

        fixing_fn = self._historical_fixing_fns[self._fixing_type]
        return fixing_fn(fixing_dt, self.time_series())

    ###########################################################################

    def _linear_in_period(self,
                          ts,
                          dt: Date):
        """ Linear blend of the fixings at the start of dt's period and of
        the next period, by day position of dt. """

        first_dt, last_dt = inflation_period(dt, self._frequency)
        next_dt = last_dt.add_days(1)

        first_fix = self._anchor_fixing(ts, first_dt)
        next_fix = self._anchor_fixing(ts, next_dt)

        dp = next_dt - first_dt
        dl = dt - first_dt
        return first_fix + (next_fix - first_fix) * dl / dp

    def _ratio_interpolated_fixing(self,
                                   fixing_dt: Date,
                                   ts):
        fixing_dt_bef = self.fixing_calendar().advance(
            fixing_dt, "-1Y", BusDayAdjustTypes.MODIFIED_FOLLOWING)

        linear_now = self._linear_in_period(ts, fixing_dt)
        linear_bef = self._linear_in_period(ts, fixing_dt_bef)
        return linear_now / linear_bef - 1.0

    def _ratio_flat_fixing(self,
                           fixing_dt: Date,
                           ts):
        first_dt = inflation_period(fixing_dt, self._frequency)[0]
        past_fixing = self._anchor_fixing(ts, first_dt)

        previous_dt = fixing_dt.add_years(-1)
        first_bef_dt = inflation_period(previous_dt, self._frequency)[0]
        previous_fixing = self._anchor_fixing(ts, first_bef_dt)

        return past_fixing / previous_fixing - 1.0

    def _level_interpolated_fixing(self,
                                   fixing_dt: Date,
                                   ts):
        return self._linear_in_period(ts, fixing_dt)

    def _level_flat_fixing(self,
                           fixing_dt: Date,
                           ts):
        first_dt = inflation_period(fixing_dt, self._frequency)[0]
        return self._anchor_fixing(ts, first_dt)

    ###########################################################################

    def forecast_fixing(self,
                        fixing_dt: Date):
        """ Year-on-year rate at fixing_dt from the linked curve. A flat index
        reads the curve at the start of the period so that every day of a
        period shares one value. """

        if self._yoy_inflation.empty():
            raise UnboundTermStructureError(self._name)

        if self._interpolated is True:
            dt = fixing_dt
        else:
            dt = inflation_period(fixing_dt, self._frequency)[0]

        return self._yoy_inflation.current_link().yoy_rate(dt, "0D")

    ###########################################################################

    def clone(self,
              yoy_inflation: Handle):
        """ Same index bound to another year-on-year term structure. """
        return YoYInflationIndex(self._family_name,
                                 self._region,
                                 self._revised,
                                 self._interpolated,
                                 self._ratio,
                                 self._frequency,
                                 self._availability_lag,
                                 self._currency,
                                 yoy_inflation)

    ###########################################################################

    def __repr__(self):
        s = super().__repr__()
        s += "\n" + label_to_string("RATIO", self._ratio)
        s += label_to_string("FIXING TYPE", self._fixing_type.name)
        s += label_to_string("HAS CURVE",
                             self._yoy_inflation.empty() is False, "")
        return s

###############################################################################
