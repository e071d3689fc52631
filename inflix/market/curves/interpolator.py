##############################################################################

##############################################################################

from enum import Enum
from numba import njit, float64
import numpy as np
from scipy.interpolate import PchipInterpolator
from scipy.interpolate import CubicSpline
from ...utils.error import LibError

###############################################################################


class InterpTypes(Enum):
    FLAT = 1
    LINEAR = 2
    PCHIP = 3
    NATCUBIC = 4

###############################################################################


@njit(float64(float64, float64[:], float64[:]), fastmath=True, cache=True)
def _linear_interpolate(t, times, values):
    """ Linear interpolation of values at time t. Outside the grid the end
    values are held flat. """

    num_points = times.size

    if t <= times[0]:
        return values[0]

    if t >= times[num_points - 1]:
        return values[num_points - 1]

    i = 1
    while times[i] < t:
        i = i + 1

    dt = times[i] - times[i - 1]
    return ((times[i] - t) * values[i - 1] + (t - times[i - 1]) * values[i]) / dt

###############################################################################


@njit(float64(float64, float64[:], float64[:]), fastmath=True, cache=True)
def _flat_interpolate(t, times, values):
    """ Piecewise constant interpolation. The value at a pillar applies from
    the previous pillar (exclusive) up to and including that pillar. """

    num_points = times.size

    if t <= times[0]:
        return values[0]

    for i in range(1, num_points):
        if t <= times[i]:
            return values[i]

    return values[num_points - 1]

###############################################################################


class Interpolator():
    """ Interpolates a curve of values (rates, log discount factors) given
    on a grid of times. Values beyond the grid are held flat; curves decide
    themselves whether extrapolation is permitted. """

    def __init__(self,
                 interpolator_type: InterpTypes):

        if isinstance(interpolator_type, InterpTypes) is False:
            raise LibError("Unknown interpolation type " +
                           str(interpolator_type))

        self._interp_type = interpolator_type
        self._interp_fn = None
        self._times = None
        self._values = None

    ###########################################################################

    def fit(self,
            times: np.ndarray,
            values: np.ndarray):

        self._times = np.asarray(times, dtype=np.float64)
        self._values = np.asarray(values, dtype=np.float64)

        if self._times.size != self._values.size:
            raise LibError("Times and values must have the same size")

        if self._times.size == 0:
            raise LibError("Cannot fit an interpolator to no points")

        if np.any(np.diff(self._times) <= 0.0):
            raise LibError("Pillar times must be strictly increasing")

        if self._times.size == 1:
            return

        if self._interp_type == InterpTypes.PCHIP:

            self._interp_fn = PchipInterpolator(self._times, self._values)

        elif self._interp_type == InterpTypes.NATCUBIC:

            """ Second derivatives are clamped to zero at end points """
            if self._times.size < 3:
                self._interp_fn = None
            else:
                self._interp_fn = CubicSpline(self._times, self._values,
                                              bc_type='natural')

    ###########################################################################

    def interpolate(self,
                    t: float):
        """ Interpolated value at time t. A numpy array of times gives a
        numpy array of values. """

        if self._values is None:
            raise LibError("Values have not been set.")

        if isinstance(t, np.ndarray):
            return np.array([self.interpolate(float(x)) for x in t])

        t = float(t)

        if self._times.size == 1:
            return float(self._values[0])

        t_clamped = min(max(t, self._times[0]), self._times[-1])

        if self._interp_type == InterpTypes.FLAT:
            return _flat_interpolate(t, self._times, self._values)

        elif self._interp_type == InterpTypes.LINEAR:
            return _linear_interpolate(t, self._times, self._values)

        elif self._interp_fn is None:
            # cubic schemes need three points
            return _linear_interpolate(t, self._times, self._values)

        return float(self._interp_fn(t_clamped))

###############################################################################
