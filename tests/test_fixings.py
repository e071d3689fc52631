"""
Test suite for inflix.market.fixings
Tests the TimeSeries container and the IndexManager fixing registry
"""
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import datetime

import numpy as np
import pandas as pd
import pytest
from inflix.utils.date import Date
from inflix.utils.error import LibError, MissingDataError, RejectedOverwriteError
from inflix.utils.observer import Observer
from inflix.market.fixings.time_series import TimeSeries
from inflix.market.fixings.index_manager import IndexManager


class CountingObserver(Observer):
    """Observer that counts its updates"""

    def __init__(self):
        Observer.__init__(self)
        self.count = 0

    def update(self):
        self.count += 1


class TestTimeSeries:
    """Test cases for TimeSeries"""

    def test_missing_date_is_none(self):
        """Absent dates give None rather than an error"""
        ts = TimeSeries("UK RPI")
        ts[Date(1, 1, 2024)] = 200.0
        assert ts.get(Date(1, 2, 2024)) is None
        assert ts[Date(1, 2, 2024)] is None
        assert Date(1, 2, 2024) not in ts
        assert ts.get(Date(1, 1, 2024)) == 200.0

    def test_value_raises_missing_data(self):
        """value() names the series and the date"""
        ts = TimeSeries("UK RPI")
        with pytest.raises(MissingDataError) as exc_info:
            ts.value(Date(1, 3, 2024))
        assert exc_info.value.index_name == "UK RPI"
        assert exc_info.value.dt == Date(1, 3, 2024)

    def test_iteration_is_ordered(self):
        """Iteration yields (date, value) pairs by date"""
        ts = TimeSeries("UK RPI")
        ts[Date(1, 3, 2024)] = 3.0
        ts[Date(1, 1, 2024)] = 1.0
        ts[Date(1, 2, 2024)] = 2.0

        assert [v for _, v in ts] == [1.0, 2.0, 3.0]
        assert ts.dates() == [Date(1, 1, 2024), Date(1, 2, 2024), Date(1, 3, 2024)]
        assert ts.first_date() == Date(1, 1, 2024)
        assert ts.last_date() == Date(1, 3, 2024)
        assert len(ts) == 3

    def test_empty_series(self):
        """An empty series has no first date"""
        ts = TimeSeries("UK RPI")
        assert ts.empty() is True
        with pytest.raises(LibError):
            ts.first_date()

    def test_pandas_conversion(self):
        """A pandas Series with gaps loads without the NaN entries"""
        series = pd.Series([200.0, np.nan, 207.5],
                           index=[datetime.date(2024, 1, 1),
                                  datetime.date(2024, 2, 1),
                                  datetime.date(2024, 3, 1)],
                           name="UK RPI")
        ts = TimeSeries.from_series(series)

        assert ts.name() == "UK RPI"
        assert len(ts) == 2
        assert ts.get(Date(1, 3, 2024)) == 207.5
        assert ts.get(Date(1, 2, 2024)) is None

        out = ts.to_series()
        assert list(out.values) == [200.0, 207.5]
        assert out.index[0] == datetime.date(2024, 1, 1)


class TestIndexManager:
    """Test cases for the IndexManager registry"""

    def test_singleton(self):
        """Every IndexManager() is the same object"""
        assert IndexManager() is IndexManager()

    def test_names_are_case_insensitive(self):
        """Histories are shared across name casing"""
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])
        assert IndexManager().has_history("uk rpi") is True
        assert IndexManager().history("Uk Rpi").get(Date(1, 1, 2024)) == 200.0

    def test_identical_value_is_accepted(self):
        """Re-publishing the same value is not an overwrite"""
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])
        assert IndexManager().history("UK RPI").get(Date(1, 1, 2024)) == 200.0

    def test_rejected_overwrite_is_all_or_nothing(self):
        """A conflicting batch leaves the history untouched"""
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])

        with pytest.raises(RejectedOverwriteError) as exc_info:
            IndexManager().add_fixings("UK RPI",
                                       [Date(1, 2, 2024), Date(1, 1, 2024)],
                                       [206.0, 201.0])

        err = exc_info.value
        assert err.dt == Date(1, 1, 2024)
        assert err.existing == 200.0
        assert err.new == 201.0

        history = IndexManager().history("UK RPI")
        assert history.get(Date(1, 1, 2024)) == 200.0
        assert history.get(Date(1, 2, 2024)) is None

    def test_conflict_within_batch_is_rejected(self):
        """Two different values for one date in the same batch"""
        with pytest.raises(RejectedOverwriteError) as exc_info:
            IndexManager().add_fixings("UK RPI",
                                       [Date(1, 3, 2024), Date(1, 3, 2024)],
                                       [1.0, 2.0])

        assert exc_info.value.existing == 1.0
        assert exc_info.value.new == 2.0
        assert IndexManager().history("UK RPI").get(Date(1, 3, 2024)) is None

    def test_repeated_value_within_batch_is_accepted(self):
        IndexManager().add_fixings("UK RPI",
                                   [Date(1, 3, 2024), Date(1, 3, 2024)],
                                   [207.5, 207.5])
        assert IndexManager().history("UK RPI").get(Date(1, 3, 2024)) == 207.5

    def test_round_off_is_not_an_overwrite(self):
        """Values equal up to round-off may be re-published"""
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [0.1 + 0.2])
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [0.3])

        with pytest.raises(RejectedOverwriteError):
            IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [0.3001])

    def test_forced_overwrite(self):
        """force_overwrite replaces stored values"""
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])
        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [201.0],
                                   force_overwrite=True)
        assert IndexManager().history("UK RPI").get(Date(1, 1, 2024)) == 201.0

    def test_mismatched_lengths(self):
        """Dates and values must pair up"""
        with pytest.raises(LibError):
            IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [])

    def test_publishing_notifies(self):
        """Observers of a name hear about new fixings and clears"""
        observer = CountingObserver()
        observer.register_with(IndexManager().notifier("UK RPI"))

        IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [200.0])
        assert observer.count == 1

        IndexManager().clear_history("UK RPI")
        assert observer.count == 2
        assert IndexManager().history("UK RPI").empty() is True

    def test_set_history(self):
        """A whole history can be installed at once"""
        ts = TimeSeries("US CPI")
        ts[Date(1, 1, 2024)] = 308.4
        IndexManager().set_history("US CPI", ts)
        assert IndexManager().history("us cpi").get(Date(1, 1, 2024)) == 308.4
