"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from regressionlab.core.result import Result
from regressionlab.core.points import PointSet


@dataclass(frozen=True)
class FitParams:
    """
    Parameter payload for a simple linear fit.

    This is the immutable data computed by backends. For fewer than two
    points the line is undefined: slope and intercept are 0, the arrays
    are empty and the means are None.
    """
    slope: float
    intercept: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    mean_x: float | None
    mean_y: float | None


@dataclass(frozen=True)
class Prediction:
    """One point with its predicted value on the fitted line."""
    x: float
    y_actual: float
    y_predicted: float

    @property
    def residual(self) -> float:
        return self.y_actual - self.y_predicted

    def to_dict(self) -> dict[str, float]:
        return {'x': self.x, 'yActual': self.y_actual, 'yPredicted': self.y_predicted}


@dataclass
class FitSolution:
    """
    User-facing fit results.

    Wraps the backend Result and provides convenient accessors for the
    line, its predictions and display output.
    """
    _result: Result[FitParams]
    _points: PointSet

    # Cached computations
    _predictions: tuple[Prediction, ...] | None = None

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def mean_x(self) -> float | None:
        return self._result.params.mean_x

    @property
    def mean_y(self) -> float | None:
        return self._result.params.mean_y

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def predictions(self) -> tuple[Prediction, ...]:
        """Per-point predictions in input order (empty for < 2 points)."""
        if self._predictions is None:
            fitted = self.fitted_values
            if fitted.size == 0:
                self._predictions = ()
            else:
                self._predictions = tuple(
                    Prediction(x=float(x), y_actual=float(y), y_predicted=float(p))
                    for x, y, p in zip(self._points.x, self._points.y, fitted)
                )
        return self._predictions

    @property
    def points(self) -> PointSet:
        return self._points

    @property
    def n(self) -> int:
        return self._points.n

    @property
    def is_degenerate(self) -> bool:
        """True when there were too few points to define a line."""
        return self.mean_x is None

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """Evaluate the fitted line at x (scalar in, float out)."""
        x_arr = np.asarray(x, dtype=np.float64)
        y_hat = self.slope * x_arr + self.intercept
        if y_hat.ndim == 0:
            return float(y_hat)
        return y_hat

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible record for the charting layer."""
        return {
            'slope': self.slope,
            'intercept': self.intercept,
            'predictions': [p.to_dict() for p in self.predictions],
            'meanX': self.mean_x,
            'meanY': self.mean_y,
        }

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "Simple Linear Regression",
            "=" * 40,
            f"Observations: {self.n}",
            f"Method: {self.info.get('method', 'least_squares')}",
            f"Slope:      {self.slope:14.6f}",
            f"Intercept:  {self.intercept:14.6f}",
        ]
        if not self.is_degenerate:
            lines.append(f"Mean x:     {self.mean_x:14.6f}")
            lines.append(f"Mean y:     {self.mean_y:14.6f}")
            lines.append(f"Line: y = {self.slope:.4f}x + {self.intercept:.4f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("-" * 40)
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(n={self.n}, slope={self.slope:.4f}, "
            f"intercept={self.intercept:.4f})"
        )
