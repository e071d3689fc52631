"""
Process-wide settings.

The Settings singleton holds the evaluation date ("today") that the forecast
cut-off logic of every inflation index reads by default. It is observable:
setting a new evaluation date notifies the registered indices, which pass
the notification on to their own observers.

Every fixing method also accepts an explicit value_dt so that a single call
can be evaluated as of any date without touching the global state.

Example:
    >>> from inflix.utils.settings import Settings
    >>> Settings().evaluation_dt = Date(15, 6, 2024)
    >>> ukrpi.fixing(Date(1, 3, 2024))          # uses 15-JUN-2024
    >>> ukrpi.fixing(Date(1, 3, 2024), Date(1, 1, 2024))
    >>> Settings().reset_defaults()
"""

import datetime
import logging
from copy import deepcopy

from .date import Date
from .day_count import DayCountTypes
from .observer import Observable

logger = logging.getLogger(__name__)

DEFAULTS = dict(
    evaluation_dt=None,
    default_observation_lag="3M",
    default_day_count=DayCountTypes.ACT_365F,
)

###############################################################################


class Settings(Observable):
    """
    The settings object read by indices when no value date is passed.

    An evaluation_dt of None means the system date.
    """

    _instance = None

    default_observation_lag: str
    default_day_count: DayCountTypes

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Settings, cls).__new__(cls)
            Observable.__init__(cls._instance)
            cls._instance._set_defaults()

        return cls._instance

    def __init__(self):
        # state is set once in __new__
        pass

    def _set_defaults(self):
        self._evaluation_dt = deepcopy(DEFAULTS["evaluation_dt"])
        for k, v in DEFAULTS.items():
            if k != "evaluation_dt":
                setattr(self, k, deepcopy(v))

    ###########################################################################

    @property
    def evaluation_dt(self):
        """ The evaluation date, or today's system date if none was set. """
        if self._evaluation_dt is None:
            return Date.from_date(datetime.date.today())
        return self._evaluation_dt

    @evaluation_dt.setter
    def evaluation_dt(self, dt):
        if dt == self._evaluation_dt:
            return
        logger.debug("Evaluation date set to %s", dt)
        self._evaluation_dt = dt
        self.notify_observers()

    ###########################################################################

    def reset_defaults(self):
        """ Revert settings to their initial values. Observers are notified if
        the evaluation date changes. """
        old_dt = self._evaluation_dt
        self._set_defaults()
        if old_dt is not None:
            self.notify_observers()

###############################################################################
