"""
Date-keyed time series of historical fixings.

A TimeSeries maps Dates to floats. Looking up a date that is not stored is
never an error in itself: get() returns None and the caller decides what
an absence means. value() folds that check into one call and raises
MissingDataError naming the series and the date.

Conversion to and from a pandas Series indexed by datetime.date allows
fixings to be loaded from CSV files or other pandas sources.

Example:
    >>> ts = TimeSeries("UK RPI")
    >>> ts[Date(1, 1, 2024)] = 354.2
    >>> ts.get(Date(1, 2, 2024)) is None
    True
    >>> ts.value(Date(1, 1, 2024))
    354.2
"""

import pandas as pd
from typing import Dict, Optional

from inflix.utils.date import Date
from inflix.utils.error import LibError, MissingDataError
from inflix.utils.helpers import label_to_string

###############################################################################


class TimeSeries:
    """ Ordered mapping from dates to fixing values. """

    def __init__(self,
                 name: str = ""):
        self._name = name
        # {excel_dt: value}
        self._values: Dict[int, float] = {}

    ###########################################################################

    def get(self, dt: Date) -> Optional[float]:
        """ Value stored at dt or None if there is none. """
        return self._values.get(dt._excel_dt)

    def value(self, dt: Date) -> float:
        """ Value stored at dt. Raises MissingDataError if absent. """
        v = self._values.get(dt._excel_dt)
        if v is None:
            raise MissingDataError(self._name, dt)
        return v

    def __getitem__(self, dt: Date) -> Optional[float]:
        return self.get(dt)

    def __setitem__(self, dt: Date, value: float):
        self._values[dt._excel_dt] = float(value)

    def __contains__(self, dt: Date):
        return dt._excel_dt in self._values

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        for excel_dt in sorted(self._values):
            yield Date.from_excel(excel_dt), self._values[excel_dt]

    ###########################################################################

    def name(self):
        return self._name

    def empty(self):
        return len(self._values) == 0

    def first_date(self):
        if self.empty():
            raise LibError("Time series " + self._name + " is empty")
        return Date.from_excel(min(self._values))

    def last_date(self):
        if self.empty():
            raise LibError("Time series " + self._name + " is empty")
        return Date.from_excel(max(self._values))

    def dates(self):
        return [Date.from_excel(x) for x in sorted(self._values)]

    def values(self):
        return [self._values[x] for x in sorted(self._values)]

    def clear(self):
        self._values.clear()

    ###########################################################################

    def to_series(self) -> pd.Series:
        """ Export as a pandas Series indexed by datetime.date. """
        dates = [dt.datetime() for dt in self.dates()]
        return pd.Series(self.values(), index=dates, name=self._name,
                         dtype=float)

    @classmethod
    def from_series(cls,
                    series: pd.Series,
                    name: str = None):
        """ Build from a pandas Series indexed by dates or datetimes. Missing
        (NaN) values are skipped. """
        if name is None:
            name = "" if series.name is None else str(series.name)

        ts = cls(name)
        for idx, v in series.dropna().items():
            ts[Date.from_date(pd.Timestamp(idx))] = v
        return ts

    ###########################################################################

    def __repr__(self):
        s = label_to_string("OBJECT TYPE", type(self).__name__)
        s += label_to_string("NAME", self._name)
        s += label_to_string("NUM FIXINGS", len(self._values))
        if self.empty() is False:
            s += label_to_string("FIRST DATE", self.first_date())
            s += label_to_string("LAST DATE", self.last_date(), "")
        return s

###############################################################################
