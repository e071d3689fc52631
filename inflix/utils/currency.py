"""
Currency type enumeration.

Inflation indices carry the currency of the economy they track so that
linked instruments can be matched to the right discount curve.

Supported currencies:
- USD: US Dollar
- EUR: Euro
- GBP: British Pound Sterling
- AUD: Australian Dollar
- ZAR: South African Rand
- CAD: Canadian Dollar
- JPY: Japanese Yen
- NONE: No currency specified

Example:
    >>> ukrpi = ZeroInflationIndex("RPI", RegionTypes.UK, False, False,
    ...                            FrequencyTypes.MONTHLY, "1M",
    ...                            CurrencyTypes.GBP)
"""

from enum import Enum

###############################################################################

class CurrencyTypes(Enum):
    USD = 1
    EUR = 2
    GBP = 3
    AUD = 6
    CAD = 5
    JPY = 11
    ZAR = 16
    NONE = 15

###############################################################################
