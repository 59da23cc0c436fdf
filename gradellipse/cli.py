"""
Command-line ellipse fit of a point+gradient file.

Usage
-----
    gradellipse-fit path/to/points.txt
    python -m gradellipse path/to/points.txt -v
"""

import argparse
import logging
import sys

from gradellipse._buffer import EquationBuffer
from gradellipse.exceptions import GradEllipseError
from gradellipse.fit_ellipse_gradients import fit_ellipse_with_gradients
from gradellipse.io import format_params, load_points_with_gradients


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="gradellipse-fit",
        description="Fit an ellipse to points with gradient directions.",
    )
    p.add_argument("path",
                   help="File with the number of points on the first line, "
                        "then one 'x y gradx grady' line per point.")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log debug messages.")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s")

    try:
        pts, grad = load_points_with_gradients(args.path)
        params = fit_ellipse_with_gradients(pts, grad, EquationBuffer())
    except (GradEllipseError, OSError) as e:
        print(e, file=sys.stderr)
        return 1

    print(format_params(params))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
