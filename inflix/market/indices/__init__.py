"""
Market indices package for inflation indices.

Provides index management for:
- Zero-coupon inflation indices (CPI, RPI, HICP) with historical fixings
- Year-on-year inflation indices, ratio based or rate based
- Forecast of fixings from inflation term structures
- CPI fixings under an explicit interpolation convention
"""

from .inflation_index import InflationIndex, ZeroInflationIndex, YoYInflationIndex
from .cpi import lagged_fixing, effective_interpolation_type

__all__ = ['InflationIndex', 'ZeroInflationIndex', 'YoYInflationIndex',
           'lagged_fixing', 'effective_interpolation_type']
