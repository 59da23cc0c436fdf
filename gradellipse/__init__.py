from .basic import (
    antisym,
    get_params,
    coefficients_to_conic,
    conic_to_coefficients,
    check_fit,
    make_points,
)
from .exceptions import GradEllipseError, InvalidInputError, OutOfMemoryError
from ._buffer import EquationBuffer
from ._normalize_points import normalize_points
from ._equations import get_equations
from .fit_ellipse_gradients import fit_ellipse_with_gradients, fit_conic_with_gradients
from .io import load_points_with_gradients, format_params
