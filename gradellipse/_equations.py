"""Linear equations of the gradient ellipse fit."""

import numpy as np

from gradellipse._buffer import EQUATIONS_PER_POINT, N_COEFFS
from gradellipse._process_params import _process_params
from gradellipse.basic import antisym
from gradellipse.exceptions import InvalidInputError


def get_equations(pts: np.ndarray, grad: np.ndarray, T: np.ndarray, out: np.ndarray=None) -> np.ndarray:
    """Equations of the conic constrained by points and gradients.

    Parameters
    ----------
    pts : array_like (N, 2)
        Points (x, y) on the ellipse.
    grad : array_like (N, 2)
        Gradient (normal) direction at every point.
    T : array_like (3, 3)
        Normalization transform from normalize_points().
    out : None or array_like (4*N, 6), optional
        Array the equations are written to, typically a view from
        EquationBuffer.rows().  Every row is overwritten.

    Returns
    -------
    out : array_like (4*N, 6)
        For every point, three tangential equations followed by one
        positional equation in the unknowns
        (s00, s01, s02, s11, s12, s22) of the symmetric conic matrix
        s in normalized coordinates.

    Notes
    -----
    With p the normalized point (px, py, 1) and l the tangent line
    through p, the conic s must satisfy

        antisym(l) @ s @ p = 0   (s @ p is proportional to l)
        p @ s @ p = 0            (p lies on s)

    The tangent line is p x (dx, dy, 0), where (dx, dy) is the
    gradient turned by 90 degrees and scaled by the linear part of T.
    """

    pts, grad = _process_params(pts, grad)
    T = np.asarray(T, dtype=float)
    if T.shape != (3, 3):
        raise InvalidInputError(
            'T must have shape (3, 3), got %s' % (T.shape,))
    nPts = pts.shape[0]
    shape = (nPts*EQUATIONS_PER_POINT, N_COEFFS)
    if out is None:
        out = np.empty(shape)
    elif out.shape != shape:
        raise InvalidInputError(
            'out must have shape %s, got %s' % (shape, out.shape))

    # normalized points
    px = T[0, 0]*pts[:, 0] + T[0, 1]*pts[:, 1] + T[0, 2]
    py = T[1, 0]*pts[:, 0] + T[1, 1]*pts[:, 1] + T[1, 2]

    # normalized tangent directions (directions are not translated)
    dx = -T[0, 0]*grad[:, 1] + T[0, 1]*grad[:, 0]
    dy = -T[1, 0]*grad[:, 1] + T[1, 1]*grad[:, 0]

    # tangent lines (px, py, 1) x (dx, dy, 0)
    lines = np.stack((-dy, dx, px*dy - py*dx), axis=-1)
    A = antisym(lines)  # (N, 3, 3)

    eq = out.reshape((nPts, EQUATIONS_PER_POINT, N_COEFFS))
    for r in range(3):
        u0, u1, u2 = A[:, 0, r], A[:, 1, r], A[:, 2, r]
        eq[:, r, 0] = -u0*px
        eq[:, r, 1] = -(u1*px + u0*py)
        eq[:, r, 2] = -(u2*px + u0)
        eq[:, r, 3] = -u1*py
        eq[:, r, 4] = -(u2*py + u1)
        eq[:, r, 5] = -u2

    # p @ s @ p = 0
    eq[:, 3, 0] = px*px
    eq[:, 3, 1] = 2*px*py
    eq[:, 3, 2] = 2*px
    eq[:, 3, 3] = py*py
    eq[:, 3, 4] = 2*py
    eq[:, 3, 5] = 1

    return out


if __name__ == '__main__':
    pass
