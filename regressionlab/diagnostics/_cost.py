"""
Cost landscape sampling.

cost_surface() evaluates a loss over a regular (slope, intercept) grid for
3D surface and contour plots; cost_curve() sweeps the slope alone at a
fixed intercept for the 1D cost-vs-weight view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

import numpy as np
from numpy.typing import NDArray

from regressionlab.core.defaults import (
    DEFAULT_SLOPE_RANGE,
    DEFAULT_INTERCEPT_RANGE,
    DEFAULT_RESOLUTION,
    DEFAULT_CURVE_SLOPE_RANGE,
    DEFAULT_CURVE_STEP,
)
from regressionlab.core.exceptions import ValidationError
from regressionlab.core.points import as_point_set
from regressionlab.core.validation import (
    check_choice,
    check_finite_scalar,
    check_integer,
    check_range,
)
from regressionlab.metrics._common import mean_absolute_error, mean_squared_error


LossName = Literal['mse', 'mae']

_LOSSES: dict[str, Callable[..., float]] = {
    'mse': mean_squared_error,
    'mae': mean_absolute_error,
}


def _grid_mse(residuals: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return np.mean(residuals * residuals, axis=-1)


def _grid_mae(residuals: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return np.mean(np.abs(residuals), axis=-1)


# Same losses reduced over the last (point) axis of a residual grid
_GRID_REDUCERS: dict[str, Callable[[NDArray[np.floating[Any]]], NDArray[np.floating[Any]]]] = {
    'mse': _grid_mse,
    'mae': _grid_mae,
}


@dataclass(frozen=True, eq=False)
class CostSurface:
    """
    Loss sampled on a (resolution+1) x (resolution+1) grid.

    slopes[i][j], intercepts[i][j] and costs[i][j] describe the same
    vertex: slope varies along i, intercept along j.
    """
    slopes: NDArray[np.floating[Any]]
    intercepts: NDArray[np.floating[Any]]
    costs: NDArray[np.floating[Any]]
    loss: str
    cap: float | None = None

    @property
    def shape(self) -> tuple[int, int]:
        return self.costs.shape

    def to_dict(self) -> dict[str, Any]:
        return {
            'slopes': self.slopes.tolist(),
            'intercepts': self.intercepts.tolist(),
            'costs': self.costs.tolist(),
        }


@dataclass(frozen=True, eq=False)
class CostCurve:
    """Loss as a function of slope at a fixed intercept."""
    slopes: NDArray[np.floating[Any]]
    costs: NDArray[np.floating[Any]]
    intercept: float
    loss: str

    def to_dict(self) -> dict[str, Any]:
        return {
            'weights': self.slopes.tolist(),
            'costs': self.costs.tolist(),
        }


def cost_surface(
    points: Any,
    slope_range: tuple[float, float] = DEFAULT_SLOPE_RANGE,
    intercept_range: tuple[float, float] = DEFAULT_INTERCEPT_RANGE,
    resolution: int = DEFAULT_RESOLUTION,
    *,
    loss: LossName = 'mse',
    cap: float | None = None,
) -> CostSurface:
    """
    Sample a loss over a regular (slope, intercept) grid.

    Vertex (i, j) has slope = slope_range[0] + i·Δs and
    intercept = intercept_range[0] + j·Δb, with Δ = (max - min)/resolution,
    for i, j in 0..resolution.

    Args:
        points: Point data.
        slope_range: (min, max) slope.
        intercept_range: (min, max) intercept.
        resolution: Number of grid steps per axis (>= 1).
        loss: 'mse' (default) or 'mae'.
        cap: If given, costs are clipped to at most this value so a single
            steep corner does not flatten the rest of a plot.

    Returns:
        CostSurface with three equal-shaped 2D arrays.

    Raises:
        ValidationError: On a non-positive resolution, a malformed range,
            an unknown loss or a non-finite cap.
    """
    ps = as_point_set(points)
    s_min, s_max = check_range(slope_range, 'slope_range')
    b_min, b_max = check_range(intercept_range, 'intercept_range')
    resolution = check_integer(resolution, 'resolution', minimum=1)
    reduce_fn = _GRID_REDUCERS[check_choice(loss, _LOSSES, 'loss')]
    if cap is not None:
        cap = check_finite_scalar(cap, 'cap')

    slope_step = (s_max - s_min) / resolution
    intercept_step = (b_max - b_min) / resolution
    steps = np.arange(resolution + 1)
    slope_axis = s_min + steps * slope_step
    intercept_axis = b_min + steps * intercept_step

    slopes, intercepts = np.meshgrid(slope_axis, intercept_axis, indexing='ij')
    if ps.n == 0:
        costs = np.zeros_like(slopes)
    else:
        # residuals[i, j, k] for vertex (i, j) and point k
        residuals = ps.y - (slopes[..., None] * ps.x + intercepts[..., None])
        costs = reduce_fn(residuals)

    if cap is not None:
        costs = np.minimum(costs, cap)

    return CostSurface(
        slopes=slopes,
        intercepts=intercepts,
        costs=costs,
        loss=loss,
        cap=cap,
    )


def cost_curve(
    points: Any,
    intercept: float,
    slope_range: tuple[float, float] = DEFAULT_CURVE_SLOPE_RANGE,
    step: float = DEFAULT_CURVE_STEP,
    *,
    loss: LossName = 'mse',
) -> CostCurve:
    """
    Sweep the slope at a fixed intercept.

    Samples slope_range[0] + k·step for k = 0..round((max - min)/step),
    so both ends are included when the range is a multiple of step.

    Raises:
        ValidationError: On a non-positive step, a descending range or an
            unknown loss.
    """
    ps = as_point_set(points)
    intercept = check_finite_scalar(intercept, 'intercept')
    lo, hi = check_range(slope_range, 'slope_range')
    step = check_finite_scalar(step, 'step')
    if step <= 0:
        raise ValidationError(f"step: must be > 0, got {step}")
    if hi < lo:
        raise ValidationError(
            f"slope_range: min must not exceed max, got ({lo}, {hi})"
        )
    loss_fn = _LOSSES[check_choice(loss, _LOSSES, 'loss')]

    count = int(round((hi - lo) / step)) + 1
    slopes = lo + np.arange(count) * step
    costs = np.array(
        [loss_fn(ps.x, ps.y, float(s), intercept) for s in slopes],
        dtype=np.float64,
    )
    return CostCurve(slopes=slopes, costs=costs, intercept=intercept, loss=loss)
