"""
Simple linear regression (one feature plus intercept).

Public API:
    fit(points) -> FitSolution
    normal_equation(points) -> FitSolution

Example:
    >>> from regressionlab.regression import fit
    >>> result = fit([{'x': 1, 'y': 2}, {'x': 2, 'y': 4}])
    >>> print(result.slope, result.intercept)
    >>> print(result.summary())
"""

from regressionlab.regression.solution import FitParams, FitSolution, Prediction
from regressionlab.regression.solvers import fit, normal_equation

__all__ = [
    "fit",
    "normal_equation",
    "FitParams",
    "FitSolution",
    "Prediction",
]
