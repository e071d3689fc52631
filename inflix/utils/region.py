"""
Geographic or economic scope of an inflation series.

A Region is an immutable (name, code) pair. The name forms the first part of
the index display name, e.g. region "UK" with family "RPI" gives "UK RPI".

Example:
    >>> RegionTypes.UK.name
    'UK'
    >>> Region("Eurozone", "EU") == RegionTypes.EU
    True
"""

from dataclasses import dataclass

###############################################################################


@dataclass(frozen=True)
class Region:
    name: str
    code: str

###############################################################################


class RegionTypes:
    UK = Region("UK", "UK")
    EU = Region("Eurozone", "EU")
    US = Region("USA", "US")
    FR = Region("France", "FR")
    AU = Region("Australia", "AU")
    ZA = Region("South Africa", "ZA")

###############################################################################
