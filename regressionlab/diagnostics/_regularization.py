"""
L1/L2 regularization penalties.

The penalties are added to any precomputed base cost; they work on
scalars and on numpy arrays alike. lam < 0 is not rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regressionlab.core.defaults import DEFAULT_LAMBDA
from regressionlab.core.validation import (
    check_array,
    check_consistent_length,
    check_ndim,
    check_real_scalar,
)


Cost = Union[float, NDArray[np.floating[Any]]]


def ridge_penalty(base_cost: Cost, weight: Cost, lam: float = DEFAULT_LAMBDA) -> Cost:
    """L2 (ridge): base_cost + lam·weight²."""
    return base_cost + lam * weight ** 2


def lasso_penalty(base_cost: Cost, weight: Cost, lam: float = DEFAULT_LAMBDA) -> Cost:
    """L1 (lasso): base_cost + lam·|weight|."""
    return base_cost + lam * abs(weight)


@dataclass(frozen=True, eq=False)
class RegularizationCurves:
    """Base, ridge and lasso costs over a sweep of weights."""
    weights: NDArray[np.floating[Any]]
    base: NDArray[np.floating[Any]]
    ridge: NDArray[np.floating[Any]]
    lasso: NDArray[np.floating[Any]]
    lam: float

    def to_dict(self) -> dict[str, Any]:
        return {
            'weights': self.weights.tolist(),
            'mseOnly': self.base.tolist(),
            'ridge': self.ridge.tolist(),
            'lasso': self.lasso.tolist(),
        }


def regularization_curves(
    weights: ArrayLike,
    base_costs: ArrayLike,
    lam: float = DEFAULT_LAMBDA,
) -> RegularizationCurves:
    """
    Apply both penalties across a weight sweep.

    Args:
        weights: 1D weights (slopes).
        base_costs: 1D unregularized cost at each weight.
        lam: Regularization strength.

    Raises:
        ValidationError: If inputs are non-numeric
        DimensionError: If inputs are not 1D or differ in length

    Example:
        >>> w = np.linspace(-3, 5, 81)
        >>> curves = regularization_curves(w, 5 + (w - 2) ** 2, lam=0.5)
    """
    w = check_array(weights, 'weights')
    base = check_array(base_costs, 'base_costs')
    check_ndim(w, 1, 'weights')
    check_ndim(base, 1, 'base_costs')
    check_consistent_length(w, base, names=('weights', 'base_costs'))
    lam = check_real_scalar(lam, 'lam')

    return RegularizationCurves(
        weights=w,
        base=base,
        ridge=ridge_penalty(base, w, lam),
        lasso=lasso_penalty(base, w, lam),
        lam=lam,
    )
