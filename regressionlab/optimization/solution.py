"""
Gradient descent solution types.

Contains the per-epoch record, the parameter payload and the user-facing
solution wrapper.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from regressionlab.core.exceptions import DivergenceError
from regressionlab.core.result import Result
from regressionlab.core.validation import check_integer
from regressionlab.metrics._common import mean_squared_error
from regressionlab.regression.solvers import fit

if TYPE_CHECKING:
    from regressionlab.optimization.design import GradientDescentDesign
    from regressionlab.regression.solution import FitSolution


@dataclass(frozen=True)
class EpochRecord:
    """
    State after one gradient-descent epoch.

    slope, intercept and loss are post-update values; the gradients are
    the ones computed from the pre-update parameters. epoch is 1-indexed
    (0 only for the initial state returned by state_at(0)).
    """
    epoch: int
    slope: float
    intercept: float
    loss: float
    slope_gradient: float
    intercept_gradient: float

    def to_dict(self) -> dict[str, Any]:
        return {
            'epoch': self.epoch,
            'slope': self.slope,
            'intercept': self.intercept,
            'loss': self.loss,
            'slopeGradient': self.slope_gradient,
            'interceptGradient': self.intercept_gradient,
        }


@dataclass(frozen=True)
class GradientDescentParams:
    """
    Parameter payload for a gradient-descent run.

    This is the immutable data computed by backends.
    """
    final_slope: float
    final_intercept: float
    history: tuple[EpochRecord, ...]
    converged: bool


@dataclass
class GradientDescentSolution:
    """
    User-facing gradient-descent results.

    Wraps Result[GradientDescentParams] and provides replay accessors for
    animating the run epoch by epoch.
    """
    _result: Result[GradientDescentParams]
    _design: 'GradientDescentDesign'

    # Cached computations
    _optimum: 'FitSolution | None' = None

    @property
    def final_slope(self) -> float:
        return self._result.params.final_slope

    @property
    def final_intercept(self) -> float:
        return self._result.params.final_intercept

    @property
    def history(self) -> tuple[EpochRecord, ...]:
        return self._result.params.history

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def diverged(self) -> bool:
        """True when the run halted on a non-finite loss."""
        return bool(self.history) and not math.isfinite(self.history[-1].loss)

    @property
    def n_epochs(self) -> int:
        """Number of epochs actually executed."""
        return len(self.history)

    @property
    def learning_rate(self) -> float:
        return self._design.learning_rate

    @property
    def losses(self) -> NDArray[np.floating[Any]]:
        return np.array([r.loss for r in self.history], dtype=np.float64)

    @property
    def slopes(self) -> NDArray[np.floating[Any]]:
        return np.array([r.slope for r in self.history], dtype=np.float64)

    @property
    def intercepts(self) -> NDArray[np.floating[Any]]:
        return np.array([r.intercept for r in self.history], dtype=np.float64)

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

    def initial_state(self) -> EpochRecord:
        """Epoch 0: the starting parameters and their loss, zero gradients."""
        d = self._design
        return EpochRecord(
            epoch=0,
            slope=d.initial_slope,
            intercept=d.initial_intercept,
            loss=mean_squared_error(d.points.x, d.points.y, d.initial_slope, d.initial_intercept),
            slope_gradient=0.0,
            intercept_gradient=0.0,
        )

    def state_at(self, epoch: int) -> EpochRecord:
        """
        State to display at a given epoch of a replay.

        Epoch 0 is the initial state; epochs past the end of the history
        clamp to the last executed epoch.
        """
        epoch = check_integer(epoch, 'epoch', minimum=0)
        if epoch == 0 or not self.history:
            return self.initial_state()
        return self.history[min(epoch, len(self.history)) - 1]

    def optimum_gap(self, epoch: int | None = None) -> tuple[float, float]:
        """
        Distance from the state at `epoch` (default: final) to the
        closed-form least-squares line, as (|Δslope|, |Δintercept|).
        """
        if self._optimum is None:
            self._optimum = fit(self._design.points)

        state = self.state_at(self.n_epochs if epoch is None else epoch)
        return (
            abs(state.slope - self._optimum.slope),
            abs(state.intercept - self._optimum.intercept),
        )

    def raise_if_diverged(self) -> None:
        """
        Raise DivergenceError if the run halted on a non-finite loss.

        Raises:
            DivergenceError: With the epoch and loss at which it diverged
        """
        if self.diverged:
            last = self.history[-1]
            raise DivergenceError(
                f"Gradient descent diverged at epoch {last.epoch} "
                f"(loss={last.loss}, learning_rate={self.learning_rate})",
                epoch=last.epoch,
                loss=last.loss,
                learning_rate=self.learning_rate,
            )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible record for the charting layer."""
        return {
            'finalSlope': self.final_slope,
            'finalIntercept': self.final_intercept,
            'history': [r.to_dict() for r in self.history],
            'converged': self.converged,
        }

    def summary(self) -> str:
        """Generate a plain-text summary."""
        d = self._design
        lines = [
            "Batch Gradient Descent",
            "=" * 40,
            f"Observations: {d.n}",
            f"Learning rate: {d.learning_rate}",
            f"Epochs: {self.n_epochs} of {d.iterations}",
            f"Converged: {self.converged}",
            f"Final slope:     {self.final_slope:14.6f}",
            f"Final intercept: {self.final_intercept:14.6f}",
        ]
        if self.history:
            lines.append(f"Final loss:      {self.history[-1].loss:14.6f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("-" * 40)
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GradientDescentSolution(epochs={self.n_epochs}, "
            f"converged={self.converged}, final_slope={self.final_slope:.4f}, "
            f"final_intercept={self.final_intercept:.4f})"
        )
