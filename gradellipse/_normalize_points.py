"""Condition point coordinates before the algebraic fit."""

import numpy as np

from gradellipse._process_params import _as_xy


def normalize_points(pts: np.ndarray) -> np.ndarray:
    """Compute the conditioning transform of a set of points.

    This procedure takes as input a set of two-dimensional
    coordinates and computes a similarity transform that moves
    their centroid to the origin and rescales them to a spread
    of about sqrt(2).

    Parameters
    ----------
    pts : array_like (N, 2) or (N,) complex
        Cartesian coordinates (x, y) of the points.

    Returns
    -------
    T : array_like (3, 3)
        Affine transformation matrix acting on the homogenous
        coordinates (x, y, 1) of the points.

    Raises
    ------
    InvalidInputError
        If pts is None or empty.

    Notes
    -----
    Both axes share a single scale factor, sqrt(2) over the mean
    of the per-axis root sum of squared deviations.  This is an
    axis-averaged conditioning heuristic, not the isotropic RMS
    normalization of [1]_; the fitted results depend on it, so it
    is kept as is.

    References
    ----------
    .. [1] R. Hartley, "In defense of the eight-point algorithm",
           IEEE Trans. PAMI, Vol. 19, pages 580-593 (1997)
    """

    pts = _as_xy(pts, 'pts')

    meanX, meanY = np.mean(pts, axis=0)

    # root of the summed (not averaged) squared deviations per axis
    valX = np.sqrt(np.sum((pts[:, 0] - meanX)**2))
    valY = np.sqrt(np.sum((pts[:, 1] - meanY)**2))
    s = np.sqrt(2)/((valX + valY)/2)

    T = np.array([
        [s, 0, -s*meanX],
        [0, s, -s*meanY],
        [0, 0, 1],
    ])
    return T


if __name__ == '__main__':
    pass
