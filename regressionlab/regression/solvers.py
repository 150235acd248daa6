"""
Solver dispatch for simple linear regression.

This module provides fit() and normal_equation() (public API) and backend
selection.
"""

from typing import Any, Literal

from regressionlab.core.exceptions import ValidationError
from regressionlab.core.points import as_point_set
from regressionlab.regression.solution import FitSolution
from regressionlab.regression.backends.cpu import CPUClosedFormBackend


BackendChoice = Literal['auto', 'cpu']


def fit(
    points: Any,
    *,
    backend: BackendChoice = 'auto',
) -> FitSolution:
    """
    Fit a least-squares line y = slope·x + intercept.

    This is the primary public API for the fit primitive. Input
    validation, backend selection and result wrapping happen here.

    Args:
        points: Point data in any form accepted by PointSet.from_points
            (sequence of {'x', 'y'} mappings, (x, y) pairs, an (n, 2)
            array, ...). Empty and single-point inputs are allowed.
        backend: 'auto' or 'cpu'

    Returns:
        FitSolution with slope, intercept, per-point predictions and means.
        With fewer than two points slope and intercept are 0, predictions
        are empty and the means are None.

    Raises:
        ValidationError: If points are non-numeric or non-finite
        DimensionError: If points have the wrong shape

    Example:
        >>> from regressionlab.regression import fit
        >>> result = fit([(1, 2), (2, 4), (3, 6), (4, 8)])
        >>> round(result.slope, 6), round(result.intercept, 6)
        (2.0, 0.0)
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    point_set = as_point_set(points)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(point_set, method='least_squares')

    # === Wrap and Return ===
    return FitSolution(_result=result, _points=point_set)


def normal_equation(
    points: Any,
    *,
    backend: BackendChoice = 'auto',
) -> FitSolution:
    """
    Closed-form normal-equation solution θ = (XᵀX)⁻¹ Xᵀy.

    With a single feature plus intercept this is exactly the least-squares
    line, so the result matches fit(); info['method'] records
    'normal_equation'.
    """
    point_set = as_point_set(points)
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(point_set, method='normal_equation')
    return FitSolution(_result=result, _points=point_set)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUClosedFormBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")
