"""Process common input arguments to the gradient ellipse fit."""

from typing import Tuple

import numpy as np

from gradellipse.exceptions import InvalidInputError


def _as_xy(arr, name: str) -> np.ndarray:
    """Convert (N, 2) real or (N,) complex input to a (N, 2) float array."""

    if arr is None:
        raise InvalidInputError('%s must not be None' % name)
    arr = np.asarray(arr)

    # Convert complex array: (x, y) <=> (z.real, z.imag)
    if np.iscomplexobj(arr):
        if arr.ndim != 1:
            raise InvalidInputError(
                'complex %s must have shape (N,), got %s' % (
                    name, arr.shape))
        arr = np.stack((arr.real, arr.imag), axis=-1)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(
            '%s must have shape (N, 2), got %s' % (name, arr.shape))
    if arr.shape[0] == 0:
        raise InvalidInputError('%s must not be empty' % name)
    return np.ascontiguousarray(arr, dtype=float)


def _process_params(pts, grad) -> Tuple[np.ndarray, np.ndarray]:

    pts = _as_xy(pts, 'pts')
    grad = _as_xy(grad, 'grad')
    if pts.shape != grad.shape:
        raise InvalidInputError(
            'pts and grad must have the same shape, got %s and %s' % (
                pts.shape, grad.shape))
    return pts, grad


if __name__ == '__main__':
    pass
