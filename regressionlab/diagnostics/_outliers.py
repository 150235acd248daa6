"""
Residual-based outlier detection (IQR rule) and outlier influence.

Quartiles use nearest rank on the ascending absolute residuals,
Q1 = r[floor(0.25·n)] and Q3 = r[floor(0.75·n)], without interpolation, so
results are reproducible across implementations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from regressionlab.core.defaults import IQR_MULTIPLIER, MIN_OUTLIER_POINTS
from regressionlab.core.points import as_point_set
from regressionlab.core.validation import check_real_scalar
from regressionlab.metrics import _common
from regressionlab.metrics.solvers import all_metrics
from regressionlab.regression.solvers import fit

if TYPE_CHECKING:
    from regressionlab.metrics.solution import MetricSet
    from regressionlab.regression.solution import FitSolution


@dataclass(frozen=True, eq=False)
class OutlierSet:
    """
    Indices of points whose absolute residual exceeds Q3 + 1.5·IQR.

    Indices refer to the original point order and iterate ascending. The
    quartile fields are None when there were too few points to apply the
    rule.
    """
    indices: tuple[int, ...]
    residuals: NDArray[np.floating[Any]]
    q1: float | None = None
    q3: float | None = None
    iqr: float | None = None
    threshold: float | None = None

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    @property
    def mask(self) -> NDArray[np.bool_]:
        """Boolean mask over the original points, True for outliers."""
        mask = np.zeros(self.residuals.shape[0], dtype=bool)
        mask[list(self.indices)] = True
        return mask

    def to_dict(self) -> dict[str, Any]:
        return {
            'indices': list(self.indices),
            'q1': self.q1,
            'q3': self.q3,
            'iqr': self.iqr,
            'threshold': self.threshold,
        }


@dataclass(frozen=True)
class InfluenceReport:
    """
    How much a set of points moves the fitted line.

    Changes are (with - without): the effect of including the points.
    """
    excluded: tuple[int, ...]
    fit_with: 'FitSolution'
    fit_without: 'FitSolution'
    metrics_with: 'MetricSet'
    metrics_without: 'MetricSet'

    @property
    def slope_change(self) -> float:
        return self.fit_with.slope - self.fit_without.slope

    @property
    def intercept_change(self) -> float:
        return self.fit_with.intercept - self.fit_without.intercept

    def to_dict(self) -> dict[str, Any]:
        return {
            'excluded': list(self.excluded),
            'withPoints': {
                'slope': self.fit_with.slope,
                'intercept': self.fit_with.intercept,
                'metrics': self.metrics_with.to_dict(),
            },
            'withoutPoints': {
                'slope': self.fit_without.slope,
                'intercept': self.fit_without.intercept,
                'metrics': self.metrics_without.to_dict(),
            },
            'slopeChange': self.slope_change,
            'interceptChange': self.intercept_change,
        }


def detect_outliers(points: Any, slope: float, intercept: float) -> OutlierSet:
    """
    Flag points with unusually large residuals at a fixed line.

    Args:
        points: Point data.
        slope: Line slope.
        intercept: Line intercept.

    Returns:
        OutlierSet; empty when there are fewer than 4 points.
    """
    ps = as_point_set(points)
    m = check_real_scalar(slope, 'slope')
    b = check_real_scalar(intercept, 'intercept')

    abs_residuals = np.abs(_common.residuals(ps.x, ps.y, m, b))

    n = ps.n
    if n < MIN_OUTLIER_POINTS:
        return OutlierSet(indices=(), residuals=abs_residuals)

    ordered = np.sort(abs_residuals)
    q1 = float(ordered[math.floor(0.25 * n)])
    q3 = float(ordered[math.floor(0.75 * n)])
    iqr = q3 - q1
    threshold = q3 + IQR_MULTIPLIER * iqr

    flagged = np.flatnonzero(abs_residuals > threshold)
    return OutlierSet(
        indices=tuple(int(i) for i in flagged),
        residuals=abs_residuals,
        q1=q1,
        q3=q3,
        iqr=iqr,
        threshold=threshold,
    )


def outlier_influence(points: Any, indices: Iterable[int] | None = None) -> InfluenceReport:
    """
    Compare the least-squares fit with and without a set of points.

    Args:
        points: Point data.
        indices: Points to exclude. Defaults to the outliers detected at
            the full-data fit.

    Returns:
        InfluenceReport with both fits and their metrics.

    Raises:
        ValidationError: If an index is out of range.
    """
    ps = as_point_set(points)
    fit_with = fit(ps)

    if indices is None:
        requested = list(detect_outliers(ps, fit_with.slope, fit_with.intercept))
    else:
        requested = list(indices)

    remaining = ps.without(requested)
    excluded = tuple(sorted({int(i) for i in requested}))
    fit_without = fit(remaining)

    return InfluenceReport(
        excluded=excluded,
        fit_with=fit_with,
        fit_without=fit_without,
        metrics_with=all_metrics(ps, fit_with.slope, fit_with.intercept),
        metrics_without=all_metrics(remaining, fit_without.slope, fit_without.intercept),
    )
