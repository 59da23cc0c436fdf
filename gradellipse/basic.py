import logging
from typing import Tuple

import numpy as np


def antisym(u: np.ndarray) -> np.ndarray:
    """Cross-product matrix of a 3-vector.

    Parameters
    ----------
    u : array_like ([M,] 3)
        Vector, or M vectors.

    Returns
    -------
    A : array_like ([M,] 3, 3)
        Antisymmetric matrix such that A @ v == np.cross(u, v).
    """
    u = np.asarray(u, dtype=float)
    A = np.zeros(u.shape + (3,))
    A[..., 0, 1] = -u[..., 2]
    A[..., 0, 2] = u[..., 1]
    A[..., 1, 0] = u[..., 2]
    A[..., 1, 2] = -u[..., 0]
    A[..., 2, 0] = -u[..., 1]
    A[..., 2, 1] = u[..., 0]
    return A


def coefficients_to_conic(c: np.ndarray) -> np.ndarray:
    """Symmetric matrix form of conic coefficients.

    Parameters
    ----------
    c : array_like (6,)
        Coefficients [a, b, c, d, e, f] of
        a*x**2 + b*x*y + c*y**2 + d*x + e*y + f = 0.

    Returns
    -------
    C : array_like (3, 3)
        Matrix with (x, y, 1) @ C @ (x, y, 1) equal to the conic
        polynomial.
    """
    A, B, C, D, E, F = c[:]
    return np.array([
        [A, B/2, D/2],
        [B/2, C, E/2],
        [D/2, E/2, F],
    ], dtype=float)


def conic_to_coefficients(C: np.ndarray) -> np.ndarray:
    """Inverse of coefficients_to_conic()."""
    return np.array([
        C[0, 0],
        2*C[0, 1],
        C[1, 1],
        2*C[0, 2],
        2*C[1, 2],
        C[2, 2],
    ])


def get_params(C: np.ndarray, rtol: float=1e-12) -> np.ndarray:
    """Convert a conic matrix to the common form of an ellipse.

    Parameters
    ----------
    C : array_like (3, 3)
        Symmetric conic matrix [[a, b/2, d/2], [b/2, c, e/2],
        [d/2, e/2, f]].
    rtol : float, optional
        The conic is degenerate along a rotated axis when the
        magnitude of its quadratic coefficient there is at most
        rtol times the other one.  rtol=0 only accepts exact zeros.

    Returns
    -------
    res : array_like (5,)
        (centerX, centerY, semiAxisA, semiAxisB, orientation) with
        semiAxisA measured along the orientation angle (radians).

    Notes
    -----
    The conic is rotated by theta = atan2(b, a - c)/2 so that it has
    no cross term, then the square is completed in both rotated
    coordinates.

    Two sentinels are returned instead of raising:

    - if the conic is parabolic or degenerate along one of the
      rotated axes, all five parameters are 0;
    - a negative squared radius gives a negative semi-axis (the
      signed square root), which flags a non-real axis.

    No other check is done: it is up to the caller to verify that
    both semi-axes are positive before using the ellipse.
    """
    a = C[0, 0]
    b = 2*C[0, 1]
    c = C[1, 1]
    d = 2*C[0, 2]
    e = 2*C[1, 2]
    f = C[2, 2]

    theta = 0.5*np.arctan2(b, a - c)
    cost, sint = np.cos(theta), np.sin(theta)
    cos2, sin2, cossin = cost*cost, sint*sint, cost*sint

    # coefficients in the rotated (u, v) frame
    Au = d*cost + e*sint
    Av = -d*sint + e*cost
    Auu = a*cos2 + c*sin2 + b*cossin
    Avv = a*sin2 + c*cos2 - b*cossin

    if min(abs(Auu), abs(Avv)) <= rtol*max(abs(Auu), abs(Avv)):
        logging.debug('degenerate conic: Auu=%g, Avv=%g', Auu, Avv)
        return np.zeros(5)

    tuCentre = -Au/(2*Auu)
    tvCentre = -Av/(2*Avv)
    wCentre = f - Auu*tuCentre**2 - Avv*tvCentre**2

    uCentre = tuCentre*cost - tvCentre*sint
    vCentre = tuCentre*sint + tvCentre*cost

    Ru = -wCentre/Auu
    Rv = -wCentre/Avv
    Ru = np.sqrt(Ru) if Ru > 0 else -np.sqrt(-Ru)
    Rv = np.sqrt(Rv) if Rv > 0 else -np.sqrt(-Rv)

    return np.array([uCentre, vCentre, Ru, Rv, theta])


def make_points(params: np.ndarray, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Generate points along an ellipse together with their gradients.

    Parameters
    ----------
    params : array_like (5,)
        Ellipse (centerX, centerY, a, b, theta): semi-axis a lies
        along angle theta, b is perpendicular to it.
    t : array_like (N,)
        Points along the ellipse.  t is in the interval [0, 2*pi).

    Returns
    -------
    pts : array_like (N, 2)
        Points along the ellipse.
    grad : array_like (N, 2)
        Outward normal at every point, i.e. the direction of the
        image gradient an edge detector would measure there.
    """
    xc, yc, a, b, theta = params[:]
    t = np.asarray(t, dtype=float)
    R = np.array([
        [np.cos(theta), -np.sin(theta)],
        [np.sin(theta), np.cos(theta)],
    ])
    local_pts = np.stack((a*np.cos(t), b*np.sin(t)), axis=-1)
    # the tangent (-a sin t, b cos t) turned by -90 degrees
    local_grad = np.stack((b*np.cos(t), a*np.sin(t)), axis=-1)
    pts = local_pts @ R.T + np.array([xc, yc])
    grad = local_grad @ R.T
    return pts, grad


def check_fit(c: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
    """General quadratic polynomial function.

    Parameters
    ----------
    c : array_like (6,)
        coefficients.
    x : array_like (N,)
        x coordinates assumed to be on ellipse.
    y : array_like (N,)
        y coordinates assumed to be on ellipse.

    Returns
    -------
    res : array_like
        Measure of how well the ellipse fits the points (x, y).

    Notes
    -----
    We want this to equal 0 for a good ellipse fit.  This polynomial
    is called the algebraic distance of the point (x, y) to the given
    conic.  Use conic_to_coefficients() to check a conic matrix.
    """
    x = np.asarray(x).flatten()
    y = np.asarray(y).flatten()
    return c[0]*x**2 + c[1]*x*y + c[2]*y**2 + c[3]*x + c[4]*y + c[5]
