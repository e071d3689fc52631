"""
Credit instruments module for inflix.

This module contains the discounting engine used to value bond cashflow
legs.
"""

from .bond_engine import BondEngine

__all__ = ['BondEngine']
