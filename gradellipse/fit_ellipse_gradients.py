"""Algebraic ellipse fit using positional and tangential constraints."""

import logging

import numpy as np

from gradellipse._buffer import EquationBuffer
from gradellipse._equations import get_equations
from gradellipse._normalize_points import normalize_points
from gradellipse._process_params import _process_params
from gradellipse.basic import get_params
from gradellipse.exceptions import InvalidInputError

# 8 equations for 6 unknowns
MIN_POINTS = 2


def _denormalize_conic(x: np.ndarray, T: np.ndarray) -> np.ndarray:
    """C = T.T @ s @ T for the conic s with upper triangle x.

    Written out for the 3x3 case; T has last row (0, 0, 1).
    """
    s0, s1, s2, s4, s5, s8 = x[:]
    s3, s6, s7 = s1, s2, s5
    t0, t1, t2 = T[0, :]
    t3, t4, t5 = T[1, :]

    C = np.empty((3, 3))
    C[0, 0] = t0*t0*s0 + t0*t3*s3 + t0*t3*s1 + t3*t3*s4
    C[0, 1] = t0*t1*s0 + t1*t3*s3 + t0*t4*s1 + t3*t4*s4
    C[0, 2] = (t0*t2*s0 + t2*t3*s3 + t0*t5*s1 + t3*t5*s4 +
               t0*s2 + t3*s5)
    C[1, 0] = t0*t1*s0 + t0*t4*s3 + t1*t3*s1 + t3*t4*s4
    C[1, 1] = t1*t1*s0 + t1*t4*s3 + t1*t4*s1 + t4*t4*s4
    C[1, 2] = (t1*t2*s0 + t2*t4*s3 + t1*t5*s1 + t4*t5*s4 +
               t1*s2 + t4*s5)
    C[2, 0] = (t0*t2*s0 + t0*t5*s3 + t0*s6 + t2*t3*s1 + t3*t5*s4 +
               t3*s7)
    C[2, 1] = (t1*t2*s0 + t1*t5*s3 + t1*s6 + t2*t4*s1 + t4*t5*s4 +
               t4*s7)
    C[2, 2] = (t2*t2*s0 + t2*t5*s3 + t2*s6 + t2*t5*s1 + t5*t5*s4 +
               t5*s7 + t2*s2 + t5*s5 + s8)
    return C


def fit_conic_with_gradients(pts: np.ndarray, grad: np.ndarray, buff: EquationBuffer=None) -> np.ndarray:
    """Fit a conic to points endowed with gradient directions.

    Parameters
    ----------
    pts : array_like (N, 2) or (N,) complex
        Points (x, y) assumed to be on the ellipse.  If complex,
        x = pts.real and y = pts.imag.
    grad : array_like (N, 2) or (N,) complex
        Gradient direction (gradx, grady) at every point, e.g. as
        measured by an edge detector.  Only the direction matters
        up to the relative weight it gives its point.
    buff : None or EquationBuffer, optional
        Scratch memory for the equation coefficients.  When fitting
        repeatedly, pass the same buffer to every call to avoid
        reallocations; it is grown as needed.  If None, a buffer is
        allocated for this call only.

    Returns
    -------
    C : array_like (3, 3)
        Symmetric conic matrix in the original coordinates, unit
        norm in the normalized frame (sign arbitrary).

    Raises
    ------
    InvalidInputError
        On missing or mismatched inputs, or fewer than 2 points.
    OutOfMemoryError
        If the buffer could not be grown.

    Notes
    -----
    Every point gives 3 tangential and 1 positional equation in the
    6 unknowns of the conic (see get_equations()).  The points are
    first normalized for conditioning; the least squares solution of
    the homogenous system, min ||eq @ x|| with ||x|| = 1, is the
    eigenvector of eq.T @ eq with the smallest eigenvalue.

    Two points are the smallest well-posed input; with exactly two
    points the solution is only determined up to a pencil of conics
    tangent at both of them.  Points without any spread cannot be
    normalized; the returned conic is then all NaN.
    """

    pts, grad = _process_params(pts, grad)
    nPts = pts.shape[0]
    if nPts < MIN_POINTS:
        raise InvalidInputError(
            'at least %d points are required to fit an ellipse, '
            'got %d' % (MIN_POINTS, nPts))

    if buff is None:
        buff = EquationBuffer()
    buff.reserve(nPts)

    T = normalize_points(pts)
    eq = get_equations(pts, grad, T, out=buff.rows(nPts))

    # normal equations
    A = eq.T @ eq

    # eigenvalues come back in ascending order
    try:
        _evals, evecs = np.linalg.eigh(A, UPLO='U')
    except np.linalg.LinAlgError:
        # non-finite equations, e.g. all points at one location
        logging.warning('eigen-decomposition failed, returning a NaN conic')
        return np.full((3, 3), np.nan)
    x = evecs[:, 0]

    return _denormalize_conic(x, T)


def fit_ellipse_with_gradients(pts: np.ndarray, grad: np.ndarray, buff: EquationBuffer=None, rtol: float=1e-12) -> np.ndarray:
    """Algebraic ellipse fit using positional and tangential constraints.

    Parameters
    ----------
    pts : array_like (N, 2) or (N,) complex
        Points (x, y) assumed to be on the ellipse.
    grad : array_like (N, 2) or (N,) complex
        Gradient direction at every point.
    buff : None or EquationBuffer, optional
        Reusable scratch memory, see fit_conic_with_gradients().
    rtol : float, optional
        Degeneracy tolerance passed on to get_params().

    Returns
    -------
    res : array_like (5,)
        (centerX, centerY, semiAxisA, semiAxisB, orientation).

    Notes
    -----
    If the fitted conic is not an ellipse along both of its axes,
    all 5 parameters are 0; a negative semi-axis flags an imaginary
    axis (e.g. a hyperbola).  If all points are at the same
    location, all 5 parameters are NaN.  None of these cases
    raises, let the user handle them.

    Examples
    --------
    >>> import numpy as np
    >>> from gradellipse import EquationBuffer, fit_ellipse_with_gradients, make_points
    >>> buff = EquationBuffer()
    >>> pts, grad = make_points(np.array([3, 2, 5, 1, 0]), np.linspace(0, 6, 20))
    >>> res = fit_ellipse_with_gradients(pts, grad, buff)
    """
    C = fit_conic_with_gradients(pts, grad, buff)
    return get_params(C, rtol=rtol)


if __name__ == '__main__':
    pass
