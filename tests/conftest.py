"""
Pytest configuration file for inflix library tests
Provides common fixtures and test configuration
"""
import os
import sys
import pytest

# Add the inflix package to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import key modules for fixtures
from inflix.utils.date import Date
from inflix.utils.currency import CurrencyTypes
from inflix.utils.frequency import FrequencyTypes
from inflix.utils.region import RegionTypes
from inflix.utils.settings import Settings
from inflix.utils.observer import Handle
from inflix.market.fixings.index_manager import IndexManager
from inflix.market.indices.inflation_index import (ZeroInflationIndex,
                                                    YoYInflationIndex)


@pytest.fixture(autouse=True)
def clean_global_state():
    """Every test starts and ends with default settings and no fixings"""
    Settings().reset_defaults()
    IndexManager().clear_histories()
    yield
    Settings().reset_defaults()
    IndexManager().clear_histories()


@pytest.fixture(scope="session")
def standard_value_date():
    """Standard evaluation date for tests"""
    return Date(15, 6, 2024)


@pytest.fixture
def zero_curve_handle():
    """Empty relinkable handle for a zero inflation curve"""
    return Handle()


@pytest.fixture
def ukrpi(zero_curve_handle):
    """Monthly, flat UK RPI index with a one month availability lag"""
    return ZeroInflationIndex("RPI", RegionTypes.UK, False, False,
                              FrequencyTypes.MONTHLY, "1M",
                              CurrencyTypes.GBP, zero_curve_handle)


@pytest.fixture
def ukrpi_interpolated(zero_curve_handle):
    """Monthly, interpolated UK RPI index with a one month availability lag"""
    return ZeroInflationIndex("RPI", RegionTypes.UK, False, True,
                              FrequencyTypes.MONTHLY, "1M",
                              CurrencyTypes.GBP, zero_curve_handle)


@pytest.fixture
def yoy_curve_handle():
    """Empty relinkable handle for a year-on-year inflation curve"""
    return Handle()


@pytest.fixture
def make_yoy_index(yoy_curve_handle):
    """Factory for monthly Eurozone HICP YoY indices"""
    def _make(ratio=False, interpolated=False):
        return YoYInflationIndex("YY HICP", RegionTypes.EU, False,
                                 interpolated, ratio, FrequencyTypes.MONTHLY,
                                 "1M", CurrencyTypes.EUR, yoy_curve_handle)
    return _make


@pytest.fixture(scope="session")
def rpi_2024_fixings():
    """UK RPI style index levels published for January to May 2024"""
    return {
        Date(1, 1, 2024): 200.0,
        Date(1, 2, 2024): 206.0,
        Date(1, 3, 2024): 207.5,
        Date(1, 4, 2024): 209.0,
        Date(1, 5, 2024): 210.2,
    }


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom test markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow (may take longer to run)")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "numerical: marks tests with numerical precision requirements")


# Pytest collection hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add default markers"""
    for item in items:
        # Add 'unit' marker to all tests by default
        if not any(item.iter_markers()):
            item.add_marker(pytest.mark.unit)

        # Mark integration tests
        if "integration" in item.name or item.fspath.basename.startswith("test_integration"):
            item.add_marker(pytest.mark.integration)


# Utility functions for tests
@pytest.fixture
def tolerance():
    """Standard numerical tolerance for floating point comparisons"""
    return 1e-6


@pytest.fixture
def strict_tolerance():
    """Strict numerical tolerance for high precision tests"""
    return 1e-10
