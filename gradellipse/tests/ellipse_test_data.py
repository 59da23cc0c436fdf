"""Shared ellipses and helpers for the tests."""

import numpy as np

from gradellipse import make_points

# (centerX, centerY, a, b, theta)
true_params = np.array([12.5, -4.0, 6.0, 3.0, np.deg2rad(25)])


def params_to_conic(params):
    """Conic matrix of the ellipse (centerX, centerY, a, b, theta)."""
    xc, yc, a, b, theta = params[:]
    c, s = np.cos(theta), np.sin(theta)
    # maps (x, y, 1) to the ellipse frame
    H = np.array([
        [c, s, -c*xc - s*yc],
        [-s, c, s*xc - c*yc],
        [0, 0, 1],
    ])
    return H.T @ np.diag([1/a**2, 1/b**2, -1]) @ H


def canonical(params):
    """Put the larger semi-axis first, orientation in [-pi/2, pi/2)."""
    xc, yc, a, b, theta = params[:]
    if b > a:
        a, b = b, a
        theta += np.pi/2
    theta = (theta + np.pi/2) % np.pi - np.pi/2
    return np.array([xc, yc, a, b, theta])


def noisy_points(n, sigma=0.05, seed=0):
    """n noisy samples of true_params with noisy gradients."""
    rng = np.random.default_rng(seed)
    t = np.linspace(0, 2*np.pi, n, endpoint=False)
    pts, grad = make_points(true_params, t)
    pts += sigma*rng.standard_normal(pts.shape)
    grad += sigma*rng.standard_normal(grad.shape)
    return pts, grad
