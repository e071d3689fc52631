"""
Global registry of index fixing histories.

The IndexManager singleton owns one TimeSeries per index name (names are
case-insensitive) together with an Observable notifier per name. Indices
read their history from here and register with their notifier, so that
publishing a new fixing reaches every index with that name and every
object observing those indices.

Publishing is all-or-nothing: if any date already holds a different value
and overwriting was not forced, RejectedOverwriteError is raised and no
value is written. Re-publishing an identical value, up to round-off, is
allowed. Two different values for one date within the same batch are
rejected in the same way.

Example:
    >>> IndexManager().add_fixings("UK RPI", [Date(1, 1, 2024)], [354.2])
    >>> IndexManager().history("UK RPI").get(Date(1, 1, 2024))
    354.2
    >>> IndexManager().clear_histories()
"""

import logging
import math

from inflix.utils.error import LibError, RejectedOverwriteError
from inflix.utils.global_vars import g_small
from inflix.utils.observer import Observable
from inflix.market.fixings.time_series import TimeSeries

logger = logging.getLogger(__name__)

###############################################################################


def same_fixing(x: float,
                y: float):
    """ Fixings equal up to floating point round-off. """
    return math.isclose(x, y, rel_tol=g_small, abs_tol=g_small)

###############################################################################


class IndexManager:
    """ Singleton store of fixing histories keyed by index name. """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(IndexManager, cls).__new__(cls)
            cls._instance._histories = {}
            cls._instance._notifiers = {}

        return cls._instance

    ###########################################################################

    def has_history(self, name: str):
        return name.upper() in self._histories

    def history(self, name: str):
        """ Fixing history of the named index, empty if none was added. """
        key = name.upper()
        if key not in self._histories:
            self._histories[key] = TimeSeries(name)
        return self._histories[key]

    def notifier(self, name: str):
        """ Observable notified whenever the named history changes. """
        key = name.upper()
        if key not in self._notifiers:
            self._notifiers[key] = Observable()
        return self._notifiers[key]

    def histories(self):
        return list(self._histories.keys())

    ###########################################################################

    def add_fixings(self,
                    name: str,
                    dates: list,
                    values: list,
                    force_overwrite: bool = False):
        """ Store fixings for the named index. Existing entries with a
        different value are only replaced if force_overwrite is True. """

        if len(dates) != len(values):
            raise LibError("Different number of dates (" + str(len(dates)) +
                           ") and values (" + str(len(values)) + ")")

        ts = self.history(name)

        if force_overwrite is False:
            staged = {}
            for dt, v in zip(dates, values):
                existing = staged.get(dt, ts.get(dt))
                if existing is not None and not same_fixing(existing, v):
                    raise RejectedOverwriteError(name, dt, existing, v)
                staged[dt] = v

        for dt, v in zip(dates, values):
            ts[dt] = v

        logger.debug("Stored %d fixings for %s", len(dates), name)
        self.notifier(name).notify_observers()

    ###########################################################################

    def set_history(self,
                    name: str,
                    history: TimeSeries):
        """ Replace the whole history of the named index. """
        key = name.upper()
        self._histories[key] = history
        self.notifier(name).notify_observers()

    def clear_history(self, name: str):
        key = name.upper()
        if key in self._histories:
            self._histories[key].clear()
        self.notifier(name).notify_observers()

    def clear_histories(self):
        for key in list(self._histories.keys()):
            self._histories[key].clear()
            self.notifier(key).notify_observers()

###############################################################################
