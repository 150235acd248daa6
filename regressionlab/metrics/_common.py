"""
Array-level metric kernels.

These operate on already-validated x/y arrays so that hot loops (gradient
descent epochs, cost-surface sweeps) skip the point conversion done by the
public functions. Parameters may be non-finite; overflow then yields inf
or nan instead of a numpy warning.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating[Any]]


def residuals(x: FloatArray, y: FloatArray, slope: float, intercept: float) -> FloatArray:
    """y - (slope·x + intercept)."""
    with np.errstate(over='ignore', invalid='ignore'):
        return y - (slope * x + intercept)


def mean_squared_error(x: FloatArray, y: FloatArray, slope: float, intercept: float) -> float:
    if x.size == 0:
        return 0.0
    r = residuals(x, y, slope, intercept)
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.mean(r * r))


def mean_absolute_error(x: FloatArray, y: FloatArray, slope: float, intercept: float) -> float:
    if x.size == 0:
        return 0.0
    r = residuals(x, y, slope, intercept)
    with np.errstate(over='ignore', invalid='ignore'):
        return float(np.mean(np.abs(r)))


def r_squared(x: FloatArray, y: FloatArray, slope: float, intercept: float) -> float:
    """1 - SS_res/SS_tot, or 0 for fewer than two points or constant y."""
    if x.size < 2:
        return 0.0

    # mean of a constant non-dyadic y is inexact, so ss_tot may be tiny but non-zero
    if np.all(y == y[0]):
        return 0.0

    dy = y - np.mean(y)
    ss_tot = float(dy @ dy)
    if ss_tot == 0:
        return 0.0

    r = residuals(x, y, slope, intercept)
    with np.errstate(over='ignore', invalid='ignore'):
        ss_res = float(r @ r)
    return 1.0 - ss_res / ss_tot
