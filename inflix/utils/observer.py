"""
Observer pattern and relinkable handles.

Indices do not own the term structures they forecast from. They hold a
Handle that can be relinked to a new curve at any time, and they observe
that handle so that dependents hear about the change. The same mechanism is
used for evaluation date changes (Settings) and for newly published fixings
(IndexManager notifiers).

- Observable: keeps weak references to its observers and calls update()
  on each live one
- Observer: registers with observables and reacts in update()
- Handle: a shared, relinkable reference to an object, itself observable

Example:
    >>> curve_handle = Handle()
    >>> ukrpi = ZeroInflationIndex("RPI", RegionTypes.UK, False, False,
    ...                            FrequencyTypes.MONTHLY, "1M",
    ...                            CurrencyTypes.GBP, curve_handle)
    >>> curve_handle.link_to(zero_curve)   # ukrpi.update() is called
"""

import logging
import weakref

logger = logging.getLogger(__name__)

###############################################################################


class Observable:
    """ Object that notifies its registered observers when it changes.

    Observers are held by weak reference, so registering never keeps an
    observer alive. Dead entries are dropped on the next access. """

    def __init__(self):
        self._observers = []

    def _live_observers(self):
        self._observers = [ref for ref in self._observers
                           if ref() is not None]
        return [ref() for ref in self._observers]

    def register_observer(self, observer):
        if not any(obs is observer for obs in self._live_observers()):
            self._observers.append(weakref.ref(observer))

    def unregister_observer(self, observer):
        self._observers = [ref for ref in self._observers
                           if ref() is not None and ref() is not observer]

    def num_observers(self):
        return len(self._live_observers())

    def notify_observers(self):
        for observer in self._live_observers():
            observer.update()

###############################################################################


class Observer:
    """ Object that is updated by the observables it registers with. """

    def __init__(self):
        self._observables = []

    def register_with(self, observable):
        if observable is None:
            return
        observable.register_observer(self)
        if observable not in self._observables:
            self._observables.append(observable)

    def unregister_with(self, observable):
        observable.unregister_observer(self)
        if observable in self._observables:
            self._observables.remove(observable)

    def unregister_with_all(self):
        for observable in list(self._observables):
            self.unregister_with(observable)

    def update(self):
        raise NotImplementedError("Observer must implement update()")

###############################################################################


class Handle(Observable, Observer):
    """ Shared relinkable reference. Observers of the handle are notified
    when it is relinked and, if the linked object is observable, whenever
    that object changes. """

    def __init__(self,
                 link=None):
        Observable.__init__(self)
        Observer.__init__(self)
        self._link = None
        if link is not None:
            self.link_to(link)

    def link_to(self,
                link):
        """ Point the handle at a new object and notify observers. """

        if link is self._link:
            return

        if isinstance(self._link, Observable):
            self.unregister_with(self._link)

        self._link = link

        if isinstance(link, Observable):
            self.register_with(link)

        logger.debug("Handle relinked to %s", type(link).__name__)
        self.notify_observers()

    def current_link(self):
        return self._link

    def empty(self):
        return self._link is None

    def update(self):
        self.notify_observers()

###############################################################################
