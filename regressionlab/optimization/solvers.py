"""
Solver dispatch for gradient descent.

Provides gradient_descent() for whole runs and iter_gradient_descent()
for epoch-by-epoch stepping.
"""

from typing import Any, Iterator, Literal

from regressionlab.core.defaults import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_ITERATIONS,
    DEFAULT_INITIAL_SLOPE,
    DEFAULT_INITIAL_INTERCEPT,
)
from regressionlab.core.exceptions import ValidationError
from regressionlab.optimization.design import GradientDescentDesign
from regressionlab.optimization.solution import EpochRecord, GradientDescentSolution
from regressionlab.optimization.backends.cpu import CPUBatchGradientDescentBackend


BackendChoice = Literal['auto', 'cpu']


def gradient_descent(
    points: Any,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    iterations: int = DEFAULT_ITERATIONS,
    initial_slope: float = DEFAULT_INITIAL_SLOPE,
    initial_intercept: float = DEFAULT_INITIAL_INTERCEPT,
    *,
    backend: BackendChoice = 'auto',
) -> GradientDescentSolution:
    """
    Fit a line by batch gradient descent on MSE.

    Args:
        points: Point data in any form accepted by PointSet.from_points.
        learning_rate: Step size. Any finite real is accepted, including
            values large enough to diverge.
        iterations: Maximum number of epochs (>= 0).
        initial_slope: Starting slope.
        initial_intercept: Starting intercept.
        backend: 'auto' or 'cpu'.

    Returns:
        GradientDescentSolution with the final parameters, the per-epoch
        history and the convergence flag. If an epoch produces a non-finite
        loss the run stops after recording it and converged is False.

    Raises:
        ValidationError: If the hyperparameters are invalid

    Example:
        >>> run = gradient_descent([(1, 2), (2, 4), (3, 6)], learning_rate=0.05, iterations=500)
        >>> run.converged
        True
    """
    design = GradientDescentDesign.build(
        points,
        learning_rate=learning_rate,
        iterations=iterations,
        initial_slope=initial_slope,
        initial_intercept=initial_intercept,
    )
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return GradientDescentSolution(_result=result, _design=design)


def iter_gradient_descent(
    points: Any,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    iterations: int = DEFAULT_ITERATIONS,
    initial_slope: float = DEFAULT_INITIAL_SLOPE,
    initial_intercept: float = DEFAULT_INITIAL_INTERCEPT,
    *,
    backend: BackendChoice = 'auto',
) -> Iterator[EpochRecord]:
    """
    Step through gradient descent one epoch at a time.

    Same semantics as gradient_descent(); draining the iterator yields
    exactly gradient_descent(...).history. Validation happens eagerly,
    before the first epoch is requested.
    """
    design = GradientDescentDesign.build(
        points,
        learning_rate=learning_rate,
        iterations=iterations,
        initial_slope=initial_slope,
        initial_intercept=initial_intercept,
    )
    backend_impl = _get_backend(backend)
    return backend_impl.steps(design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUBatchGradientDescentBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")
