"""
Iterative optimization of a simple linear model.

Public API:
    gradient_descent(points, ...)       -> GradientDescentSolution
    iter_gradient_descent(points, ...)  -> iterator of EpochRecord

Example:
    >>> from regressionlab.optimization import gradient_descent
    >>> run = gradient_descent(points, learning_rate=0.01, iterations=100)
    >>> run.converged, run.final_slope
    >>> run.state_at(10)     # replay the 10th epoch
"""

from regressionlab.optimization.design import GradientDescentDesign
from regressionlab.optimization.solution import (
    EpochRecord,
    GradientDescentParams,
    GradientDescentSolution,
)
from regressionlab.optimization.solvers import gradient_descent, iter_gradient_descent

__all__ = [
    "gradient_descent",
    "iter_gradient_descent",
    "GradientDescentDesign",
    "EpochRecord",
    "GradientDescentParams",
    "GradientDescentSolution",
]
