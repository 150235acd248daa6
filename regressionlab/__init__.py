"""
regressionlab: the numerical core of a visual course on linear regression.

Least-squares fitting, error metrics, gradient descent with divergence
detection, cost landscapes, outlier diagnostics, regularization penalties
and synthetic datasets, as pure functions over (x, y) point data. Every
result exposes to_dict() for a charting front end.

Submodules:
    regression: Closed-form least-squares line
    metrics: MSE, RMSE, MAE, R²
    optimization: Batch gradient descent
    diagnostics: Cost surfaces/curves, outliers, regularization
    datasets: Synthetic teaching datasets
"""

__version__ = "0.1.0"

from regressionlab import regression
from regressionlab import metrics
from regressionlab import optimization
from regressionlab import diagnostics
from regressionlab import datasets
from regressionlab.core import Point, PointSet, format_number

__all__ = [
    "__version__",
    "regression",
    "metrics",
    "optimization",
    "diagnostics",
    "datasets",
    "Point",
    "PointSet",
    "format_number",
]
