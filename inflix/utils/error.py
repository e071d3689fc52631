"""
Exception classes for inflix library errors.

LibError is the root of every error raised by the library so that callers
can catch library failures separately from other Python exceptions. The
subclasses describe the ways an inflation fixing request can fail:

- MissingDataError: a historical anchor fixing is absent from the series
- UnboundTermStructureError: a forecast needs a curve but the handle is empty
- UnanchorableForecastError: the curve base date itself needs a forecast
- InvalidInterpolationError: unknown CPI interpolation type
- RejectedOverwriteError: publishing would replace a different stored value

Example:
    >>> from inflix.utils.error import LibError, MissingDataError
    >>>
    >>> try:
    ...     ukrpi.fixing(Date(1, 3, 2010))
    ... except MissingDataError as e:
    ...     print(e.index_name, e.dt)
    ... except LibError as e:
    ...     print(f"inflix error: {e._message}")
"""


class LibError(Exception):
    """ Class to understand if the error is coming from this library """

    def __init__(self,
                 message: str):
        """ Create error object """
        super().__init__(message)
        self._message = message

    def _print(self):
        print("LibError:", self._message)

###############################################################################


class MissingDataError(LibError):
    """ A required historical fixing is not in the time series. """

    def __init__(self,
                 index_name: str,
                 dt):
        self.index_name = index_name
        self.dt = dt
        super().__init__(f"Missing {index_name} fixing for {dt}")

###############################################################################


class UnboundTermStructureError(LibError):
    """ A forecast was requested from an empty term structure handle. """

    def __init__(self,
                 index_name: str):
        self.index_name = index_name
        super().__init__(f"No inflation term structure linked to {index_name}")

###############################################################################


class UnanchorableForecastError(LibError):
    """ The term structure base date is not covered by known fixings. """

    def __init__(self,
                 index_name: str,
                 base_dt):
        self.index_name = index_name
        self.base_dt = base_dt
        super().__init__(f"{index_name} index fixing at base date "
                         f"{base_dt} is not available")

###############################################################################


class InvalidInterpolationError(LibError):
    """ Unknown CPI interpolation type. """

    def __init__(self,
                 interp_type):
        self.interp_type = interp_type
        super().__init__(f"Unknown CPI interpolation type: {interp_type}")

###############################################################################


class RejectedOverwriteError(LibError):
    """ A different value is already stored and overwriting was not forced. """

    def __init__(self,
                 name: str,
                 dt,
                 existing: float,
                 new: float):
        self.name = name
        self.dt = dt
        self.existing = existing
        self.new = new
        super().__init__(f"At least one duplicated fixing provided for {name}: "
                         f"{dt}, {new} while {existing} value is already present")
