"""
Error metrics for simple linear regression.

Public API:
    mse(points, slope, intercept)          - Mean squared error
    rmse(points, slope, intercept)         - Root mean squared error
    mae(points, slope, intercept)          - Mean absolute error
    r2(points, slope, intercept)           - Coefficient of determination
    all_metrics(points, slope, intercept)  - All four as a MetricSet
"""

from regressionlab.metrics.solution import MetricSet
from regressionlab.metrics.solvers import mse, rmse, mae, r2, all_metrics

__all__ = [
    "mse",
    "rmse",
    "mae",
    "r2",
    "all_metrics",
    "MetricSet",
]
