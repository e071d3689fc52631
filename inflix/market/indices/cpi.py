"""
CPI fixings under an explicit interpolation convention.

Inflation-linked bonds and zero-coupon swaps fix against the index value
at the payment date minus an observation lag. The contract states how that
value is interpolated, which may differ from the index's own convention.
lagged_fixing derives the value on top of a ZeroInflationIndex:

- AS_INDEX: the index fixing at dt - lag, using the index convention
- FLAT: the fixing of the period containing dt - lag
- LINEAR: the fixings of the period containing dt - lag and of the next
  period, weighted by the position of dt inside its own period

Example:
    >>> lagged_fixing(ukrpi, Date(15, 6, 2024), "3M", CPIInterpTypes.LINEAR)
    >>> effective_interpolation_type(ukrpi, CPIInterpTypes.AS_INDEX)
    <CPIInterpTypes.LINEAR: 3>
"""

from inflix.utils.date import Date
from inflix.utils.error import InvalidInterpolationError
from inflix.utils.global_types import CPIInterpTypes
from inflix.utils.inflation_period import inflation_period

###############################################################################


def lagged_fixing(index,
                  dt: Date,
                  observation_lag: str,
                  interp_type: CPIInterpTypes,
                  value_dt: Date = None):
    """ Fixing of a zero inflation index at dt observed with a lag and
    interpolated according to interp_type. """

    if interp_type == CPIInterpTypes.AS_INDEX:

        return index.fixing(dt.sub_tenor(observation_lag), value_dt)

    elif interp_type == CPIInterpTypes.FLAT:

        fixing_period = inflation_period(dt.sub_tenor(observation_lag),
                                         index.frequency())
        return index.fixing(fixing_period[0], value_dt)

    elif interp_type == CPIInterpTypes.LINEAR:

        fixing_period = inflation_period(dt.sub_tenor(observation_lag),
                                         index.frequency())
        interpolation_period = inflation_period(dt, index.frequency())

        if dt == interpolation_period[0]:
            # no interpolation so the end of period fixing, which may not
            # be available yet, is not needed
            return index.fixing(fixing_period[0], value_dt)

        i0 = index.fixing(fixing_period[0], value_dt)
        i1 = index.fixing(fixing_period[1].add_days(1), value_dt)

        days_in_period = interpolation_period[1].add_days(1) - \
            interpolation_period[0]

        return i0 + (i1 - i0) * (dt - interpolation_period[0]) / days_in_period

    else:
        raise InvalidInterpolationError(interp_type)

###############################################################################


def effective_interpolation_type(index,
                                 interp_type: CPIInterpTypes):
    """ Resolve AS_INDEX to the convention of the index itself. """

    if interp_type == CPIInterpTypes.AS_INDEX:
        if index.interpolated() is True:
            return CPIInterpTypes.LINEAR
        return CPIInterpTypes.FLAT

    return interp_type

###############################################################################
