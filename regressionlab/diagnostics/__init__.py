"""
Diagnostics: cost landscapes, outliers and regularization.

Public API:
    cost_surface(points, ...)                 - Loss over a (slope, intercept) grid
    cost_curve(points, intercept, ...)        - Loss over a slope sweep
    detect_outliers(points, slope, intercept) - IQR rule on absolute residuals
    outlier_influence(points, indices)        - Fit with vs. without points
    ridge_penalty(base_cost, weight, lam)     - L2 penalty
    lasso_penalty(base_cost, weight, lam)     - L1 penalty
    regularization_curves(weights, base, lam) - Both penalties over a sweep
"""

from regressionlab.diagnostics._cost import (
    CostCurve,
    CostSurface,
    cost_curve,
    cost_surface,
)
from regressionlab.diagnostics._outliers import (
    InfluenceReport,
    OutlierSet,
    detect_outliers,
    outlier_influence,
)
from regressionlab.diagnostics._regularization import (
    RegularizationCurves,
    lasso_penalty,
    regularization_curves,
    ridge_penalty,
)

__all__ = [
    "cost_surface",
    "cost_curve",
    "detect_outliers",
    "outlier_influence",
    "ridge_penalty",
    "lasso_penalty",
    "regularization_curves",
    "CostSurface",
    "CostCurve",
    "OutlierSet",
    "InfluenceReport",
    "RegularizationCurves",
]
