"""
Global type enumerations for inflation fixings.

Provides enumeration types used throughout the inflix library for:
- CPI interpolation conventions applied on top of a zero inflation index
- Year-on-year fixing policies derived from an index's configuration

CPI interpolation types:
- AS_INDEX: use the index's own convention
- FLAT: value of the period containing the lagged date, no interpolation
- LINEAR: linear interpolation between consecutive period fixings

Year-on-year fixing types combine whether the series stores levels that
must be turned into ratios and whether values are interpolated inside a
period:
- RATIO_INTERPOLATED: I(t)/I(t-1Y) - 1 with intra-period interpolation
- RATIO_FLAT: I(t)/I(t-1Y) - 1 using period anchors
- LEVEL_INTERPOLATED: series stores YoY rates, interpolated
- LEVEL_FLAT: series stores YoY rates, period anchor returned as is

Example:
    >>> lagged_fixing(ukrpi, Date(15, 6, 2024), "3M", CPIInterpTypes.LINEAR)
    >>> yoy_fixing_type(ratio=True, interpolated=False)
    <YoYFixingTypes.RATIO_FLAT: 2>
"""

from enum import Enum


class CPIInterpTypes(Enum):
    AS_INDEX = 1
    FLAT = 2
    LINEAR = 3

class YoYFixingTypes(Enum):
    RATIO_INTERPOLATED = 1
    RATIO_FLAT = 2
    LEVEL_INTERPOLATED = 3
    LEVEL_FLAT = 4


def yoy_fixing_type(ratio: bool,
                    interpolated: bool):
    """ Resolve the two index flags into a single fixing policy. """
    if ratio is True:
        if interpolated is True:
            return YoYFixingTypes.RATIO_INTERPOLATED
        return YoYFixingTypes.RATIO_FLAT

    if interpolated is True:
        return YoYFixingTypes.LEVEL_INTERPOLATED
    return YoYFixingTypes.LEVEL_FLAT
