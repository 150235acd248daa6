"""
CPU backend for batch gradient descent on MSE.

Per epoch, with n points and the current (slope, intercept):

    ∂/∂slope     = (2/n) Σ (ŷ - y)·x
    ∂/∂intercept = (2/n) Σ (ŷ - y)

Both gradients are taken at the pre-update parameters, then applied
simultaneously. The loss recorded for the epoch is the MSE at the
post-update parameters. A non-finite loss ends the run after it is
recorded.
"""

import math
from typing import Any, Iterator
import numpy as np

from regressionlab.core.result import Result
from regressionlab.core.compute.timing import Timer
from regressionlab.metrics._common import mean_squared_error
from regressionlab.optimization.design import GradientDescentDesign
from regressionlab.optimization.solution import EpochRecord, GradientDescentParams


class CPUBatchGradientDescentBackend:
    """
    CPU backend for full-batch gradient descent.

    steps() is a resumable stepper yielding one EpochRecord at a time;
    solve() drains it into a complete Result.
    """

    @property
    def name(self) -> str:
        return 'cpu_batch_gd'

    def steps(self, design: GradientDescentDesign) -> Iterator[EpochRecord]:
        """
        Yield one EpochRecord per executed epoch.

        With no points the gradients are 0 and the parameters never move.
        """
        x = design.points.x
        y = design.points.y
        n = design.n
        lr = design.learning_rate
        slope = design.initial_slope
        intercept = design.initial_intercept

        for epoch in range(1, design.iterations + 1):
            with np.errstate(over='ignore', invalid='ignore'):
                if n > 0:
                    error = (slope * x + intercept) - y
                    slope_gradient = float((2.0 / n) * (error @ x))
                    intercept_gradient = float((2.0 / n) * np.sum(error))
                else:
                    slope_gradient = 0.0
                    intercept_gradient = 0.0

                slope = slope - lr * slope_gradient
                intercept = intercept - lr * intercept_gradient

            loss = mean_squared_error(x, y, slope, intercept)

            yield EpochRecord(
                epoch=epoch,
                slope=slope,
                intercept=intercept,
                loss=loss,
                slope_gradient=slope_gradient,
                intercept_gradient=intercept_gradient,
            )

            if not math.isfinite(loss):
                return

    def solve(self, design: GradientDescentDesign) -> Result[GradientDescentParams]:
        """
        Run gradient descent to completion (or divergence).

        Args:
            design: Validated gradient-descent design

        Returns:
            Result containing GradientDescentParams. Divergence is reported
            through converged=False and a warning, never raised.
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        with timer.section('epochs'):
            history = tuple(self.steps(design))

        timer.stop()

        if history:
            final_slope = history[-1].slope
            final_intercept = history[-1].intercept
            converged = math.isfinite(history[-1].loss)
        else:
            final_slope = design.initial_slope
            final_intercept = design.initial_intercept
            converged = False

        if history and not converged:
            warnings_list.append(
                f"Loss became non-finite at epoch {history[-1].epoch} "
                f"(learning_rate={design.learning_rate}); run halted early"
            )

        params = GradientDescentParams(
            final_slope=final_slope,
            final_intercept=final_intercept,
            history=history,
            converged=converged,
        )

        info: dict[str, Any] = {
            'method': 'batch_gradient_descent',
            'learning_rate': design.learning_rate,
            'requested_iterations': design.iterations,
            'epochs': len(history),
            'converged': converged,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
