"""Read point+gradient files and format fit results."""

import logging
from pathlib import Path
from typing import Tuple

import numpy as np

from gradellipse.exceptions import InvalidInputError


def load_points_with_gradients(path) -> Tuple[np.ndarray, np.ndarray]:
    """Load points and their gradients from a text file.

    The first line holds the number of points N; each of the N
    following lines holds four whitespace-separated values

        x y gradx grady

    Parameters
    ----------
    path : str or Path
        Text file path.

    Returns
    -------
    pts, grad : array_like (N, 2)
        Point coordinates and gradient directions.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    with p.open() as f:
        header = f.readline().strip()
        try:
            nPts = int(header)
        except ValueError as e:
            raise InvalidInputError(
                f"{p}: first line must be the number of points, "
                f"got {header!r}") from e
        if nPts <= 0:
            raise InvalidInputError(f"{p}: invalid points size {nPts}")
        try:
            data = np.loadtxt(f, ndmin=2)
        except ValueError as e:
            raise InvalidInputError(f"{p}: {e}") from e

    if data.size == 0:
        raise InvalidInputError(f"{p}: expected {nPts} points, found 0")
    if data.shape[1] != 4:
        raise InvalidInputError(
            f"{p}: expected 4 values per line, got {data.shape[1]}")
    if data.shape[0] < nPts:
        raise InvalidInputError(
            f"{p}: expected {nPts} points, found {data.shape[0]}")
    if data.shape[0] > nPts:
        logging.warning(
            "%s: ignoring %d lines after the first %d points",
            p, data.shape[0] - nPts, nPts)

    data = data[:nPts]
    return data[:, 0:2].copy(), data[:, 2:4].copy()


def format_params(params: np.ndarray) -> str:
    """One-line text form of (centerX, centerY, a, b, orientation)."""
    return "Ellipse parameters: " + " ".join(f"{v:f}" for v in params)
