"""
Exception hierarchy for regressionlab.

All exceptions inherit from RegressionLabError to allow catching any
library-specific error.

Design principles:
    - Degenerate data (empty datasets, zero variance) is NOT an error;
      those cases return defined sentinel values
    - Exceptions are reserved for contractually invalid inputs
    - Error messages name the offending parameter and its actual value
"""


class RegressionLabError(Exception):
    """Base exception for all regressionlab errors."""
    pass


class ValidationError(RegressionLabError):
    """
    Input validation failed.

    Raised when user-provided inputs (points, learning rates, grid
    resolutions, ranges) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when point data has the wrong shape, e.g. an array that is not
    (n, 2) or x and y columns of different lengths.
    """
    pass


class NumericalError(RegressionLabError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivergenceError(NumericalError):
    """
    Gradient descent produced a non-finite loss.

    The optimizer itself never raises this: divergence is reported through
    ``converged=False`` on the solution. Callers that prefer an exception
    call ``GradientDescentSolution.raise_if_diverged()``.

    Attributes:
        epoch: Epoch (1-indexed) at which the loss became non-finite
        loss: The non-finite loss value (inf or nan)
        learning_rate: Learning rate of the diverging run
    """

    def __init__(
        self,
        message: str,
        epoch: int,
        loss: float | None = None,
        learning_rate: float | None = None,
    ):
        super().__init__(message)
        self.epoch = epoch
        self.loss = loss
        self.learning_rate = learning_rate
