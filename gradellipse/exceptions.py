"""Errors raised by the gradient-based ellipse fit."""


class GradEllipseError(Exception):
    """Base class for all errors raised by gradellipse."""


class InvalidInputError(GradEllipseError, ValueError):
    """Points or gradients are missing, empty or inconsistent."""


class OutOfMemoryError(GradEllipseError, MemoryError):
    """The equation buffer could not be grown."""
