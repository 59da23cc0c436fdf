"""Reusable scratch memory for the linear system of the fit."""

import logging

import numpy as np

from gradellipse.exceptions import InvalidInputError, OutOfMemoryError

# each point contributes 3 tangential and 1 positional equation
EQUATIONS_PER_POINT = 4
# unknowns of the symmetric 3x3 conic matrix
N_COEFFS = 6
GROWTH_FACTOR = 2


class EquationBuffer:
    """Hold the equation coefficients between repeated fits.

    The buffer is owned by the caller and passed to every fit of a
    fitting session, so that the memory is only reallocated when a
    point set larger than all previous ones comes along.  When it is
    too small it is regrown to twice the size needed at that step.
    It never shrinks.

    A single buffer must not be shared between threads without
    external locking: a fit may replace its memory.

    Parameters
    ----------
    capacity : int, optional
        Initial number of float64 elements.
    """

    def __init__(self, capacity: int=1):
        if capacity <= 0:
            raise InvalidInputError(
                'buffer capacity must be positive, got %d' % capacity)
        self.data = self._allocate(capacity)
        # number of elements currently allocated
        self.capacity = capacity

    @staticmethod
    def _allocate(size: int) -> np.ndarray:
        try:
            return np.empty(size, dtype=float)
        except MemoryError as e:
            raise OutOfMemoryError(
                'not enough memory for %d equation coefficients' % size
            ) from e

    @staticmethod
    def required(n_points: int) -> int:
        """Number of elements needed for n_points points."""
        return n_points*EQUATIONS_PER_POINT*N_COEFFS

    def reserve(self, n_points: int) -> bool:
        """Make room for the equations of n_points points.

        Returns True if the memory was reallocated.  Old contents are
        not kept: every fit overwrites the rows it uses.
        """
        if n_points <= 0:
            raise InvalidInputError(
                'number of points must be positive, got %d' % n_points)
        needed = self.required(n_points)
        if needed <= self.capacity:
            return False

        size = GROWTH_FACTOR*needed
        logging.debug(
            'growing equation buffer from %d to %d elements',
            self.capacity, size)
        self.data = self._allocate(size)
        self.capacity = size
        return True

    def rows(self, n_points: int) -> np.ndarray:
        """(4*n_points, 6) view on the start of the buffer."""
        needed = self.required(n_points)
        if needed > self.capacity:
            raise InvalidInputError(
                'buffer holds %d elements, %d needed; call reserve() '
                'first' % (self.capacity, needed))
        return self.data[:needed].reshape(
            (n_points*EQUATIONS_PER_POINT, N_COEFFS))

    def __repr__(self):
        return '%s(capacity=%d)' % (type(self).__name__, self.capacity)
