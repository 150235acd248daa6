"""
Error metrics for a candidate line.

Every function takes (points, slope, intercept). The line does not have to
come from fit(): cost-surface sweeps and gradient-descent loss curves
evaluate arbitrary candidates.
"""

from typing import Any

import numpy as np

from regressionlab.core.points import as_point_set
from regressionlab.core.validation import check_real_scalar
from regressionlab.metrics import _common
from regressionlab.metrics.solution import MetricSet


def mse(points: Any, slope: float, intercept: float) -> float:
    """
    Mean squared error, (1/n) Σ(y - ŷ)².

    Returns 0 for an empty dataset.
    """
    ps = as_point_set(points)
    m, b = _line(slope, intercept)
    return _common.mean_squared_error(ps.x, ps.y, m, b)


def rmse(points: Any, slope: float, intercept: float) -> float:
    """Root mean squared error, exactly sqrt(mse)."""
    return float(np.sqrt(mse(points, slope, intercept)))


def mae(points: Any, slope: float, intercept: float) -> float:
    """
    Mean absolute error, (1/n) Σ|y - ŷ|.

    Returns 0 for an empty dataset.
    """
    ps = as_point_set(points)
    m, b = _line(slope, intercept)
    return _common.mean_absolute_error(ps.x, ps.y, m, b)


def r2(points: Any, slope: float, intercept: float) -> float:
    """
    Coefficient of determination, 1 - SS_res/SS_tot.

    Defined as 0 (not NaN or -inf) when there are fewer than two points or
    when all y values are equal. Can be negative for a line worse than the
    horizontal line through ȳ.
    """
    ps = as_point_set(points)
    m, b = _line(slope, intercept)
    return _common.r_squared(ps.x, ps.y, m, b)


def all_metrics(points: Any, slope: float, intercept: float) -> MetricSet:
    """
    Compute MSE, RMSE, MAE and R² together.

    Example:
        >>> from regressionlab.metrics import all_metrics
        >>> all_metrics([(1, 2), (2, 4), (3, 6)], 2.0, 0.0).r2
        1.0
    """
    ps = as_point_set(points)
    m, b = _line(slope, intercept)
    mse_value = _common.mean_squared_error(ps.x, ps.y, m, b)
    return MetricSet(
        mse=mse_value,
        rmse=float(np.sqrt(mse_value)),
        mae=_common.mean_absolute_error(ps.x, ps.y, m, b),
        r2=_common.r_squared(ps.x, ps.y, m, b),
    )


def _line(slope: Any, intercept: Any) -> tuple[float, float]:
    return check_real_scalar(slope, 'slope'), check_real_scalar(intercept, 'intercept')
