"""
CPU backend for simple linear regression.

Closed-form ordinary least squares on centered data:

    slope     = Σ(x - x̄)(y - ȳ) / Σ(x - x̄)²
    intercept = ȳ - slope · x̄

For a single feature this is also the normal-equation solution
θ = (XᵀX)⁻¹ Xᵀy, so both entry points share this backend.
"""

from typing import Any
import numpy as np

from regressionlab.core.result import Result
from regressionlab.core.compute.timing import Timer
from regressionlab.core.points import PointSet
from regressionlab.regression.solution import FitParams


class CPUClosedFormBackend:
    """
    CPU backend using the centered closed-form OLS solution.

    Total over all inputs: fewer than two points give the zero line, and
    zero x-variance gives slope 0 (a horizontal line through ȳ).
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(
        self,
        points: PointSet,
        *,
        method: str = 'least_squares',
    ) -> Result[FitParams]:
        """
        Fit y = slope·x + intercept.

        Args:
            points: Validated point data
            method: Label recorded in info ('least_squares' or
                'normal_equation'); the arithmetic is identical

        Returns:
            Result containing FitParams
        """
        timer = Timer()
        timer.start()
        warnings_list = []

        x = points.x
        y = points.y
        n = points.n

        if n < 2:
            timer.stop()
            warnings_list.append(
                f"Need at least 2 points to define a line, got {n}; "
                f"returning slope=0, intercept=0"
            )
            params = FitParams(
                slope=0.0,
                intercept=0.0,
                fitted_values=np.empty(0),
                residuals=np.empty(0),
                mean_x=None,
                mean_y=None,
            )
            return Result(
                params=params,
                info={'method': method, 'n': n, 'degenerate': True},
                timing=timer.result(),
                backend_name=self.name,
                warnings=tuple(warnings_list),
            )

        # === Means and centered sums ===
        with timer.section('means'):
            mean_x = float(np.mean(x))
            mean_y = float(np.mean(y))

        with timer.section('slope'):
            dx = x - mean_x
            dy = y - mean_y
            numerator = float(dx @ dy)
            denominator = float(dx @ dx)

            # constant x can still leave rounding noise in dx
            if denominator != 0 and not np.all(x == x[0]):
                slope = numerator / denominator
            else:
                slope = 0.0
                warnings_list.append(
                    "All x values are equal (zero x-variance); slope set to 0"
                )

            intercept = mean_y - slope * mean_x

        # === Predictions ===
        with timer.section('predictions'):
            fitted_values = slope * x + intercept
            residuals = y - fitted_values

        timer.stop()

        params = FitParams(
            slope=slope,
            intercept=intercept,
            fitted_values=fitted_values,
            residuals=residuals,
            mean_x=mean_x,
            mean_y=mean_y,
        )

        info: dict[str, Any] = {
            'method': method,
            'n': n,
            'degenerate': False,
            'sxx': denominator,
            'sxy': numerator,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
