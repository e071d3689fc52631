"""
Reporting frequency types for inflation indices.

Inflation indices are published once per reporting period. Most CPI series
are monthly but some (e.g. Australian CPI) are quarterly. The frequency
fixes the length of the inflation period used to look up and interpolate
fixings.

Frequency types:
- ZERO: No periodic publication
- ANNUAL: Once per year (frequency = 1)
- SEMI_ANNUAL: Twice per year (frequency = 2)
- TRI_ANNUAL: Three times per year (frequency = 3)
- QUARTERLY: Four times per year (frequency = 4)
- MONTHLY: Twelve times per year (frequency = 12)

Example:
    >>> months_in_period(FrequencyTypes.QUARTERLY)
    3
    >>> frequency_tenor(FrequencyTypes.MONTHLY)
    '1M'
"""

from inflix.utils.error import LibError

from enum import Enum


class FrequencyTypes(Enum):
    ZERO = -1
    ANNUAL = 1
    SEMI_ANNUAL = 2
    TRI_ANNUAL = 3
    QUARTERLY = 4
    MONTHLY = 12


def months_in_period(freq_type: FrequencyTypes) -> int:
    """ Number of calendar months in one reporting period. """
    if isinstance(freq_type, FrequencyTypes) is False:
        raise LibError("Unknown frequency type")

    if freq_type == FrequencyTypes.ZERO:
        raise LibError("Frequency ZERO has no reporting period")

    return 12 // freq_type.value


def frequency_tenor(freq_type: FrequencyTypes) -> str:
    """ Tenor string of one reporting period, e.g. '3M' for QUARTERLY. """
    return str(months_in_period(freq_type)) + "M"
