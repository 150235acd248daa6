"""
Design for gradient descent.

GradientDescentDesign encapsulates all inputs needed by backends to run
batch gradient descent. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from regressionlab.core.defaults import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_ITERATIONS,
    DEFAULT_INITIAL_SLOPE,
    DEFAULT_INITIAL_INTERCEPT,
)
from regressionlab.core.points import PointSet, as_point_set
from regressionlab.core.validation import check_finite_scalar, check_integer


@dataclass(frozen=True)
class GradientDescentDesign:
    """
    Frozen design for a gradient-descent run.

    Attributes:
        points: Training data.
        learning_rate: Step size. Any finite real; large values diverge,
            which is allowed and reported rather than rejected.
        iterations: Maximum number of epochs (>= 0).
        initial_slope: Starting slope.
        initial_intercept: Starting intercept.
    """
    points: PointSet
    learning_rate: float
    iterations: int
    initial_slope: float
    initial_intercept: float

    @classmethod
    def build(
        cls,
        points: Any,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        initial_slope: float = DEFAULT_INITIAL_SLOPE,
        initial_intercept: float = DEFAULT_INITIAL_INTERCEPT,
    ) -> GradientDescentDesign:
        """
        Create a gradient-descent design with validation.

        Raises:
            ValidationError: If learning_rate or the initial parameters are
                not finite reals, or iterations is not a non-negative integer.
        """
        return cls(
            points=as_point_set(points),
            learning_rate=check_finite_scalar(learning_rate, 'learning_rate'),
            iterations=check_integer(iterations, 'iterations', minimum=0),
            initial_slope=check_finite_scalar(initial_slope, 'initial_slope'),
            initial_intercept=check_finite_scalar(initial_intercept, 'initial_intercept'),
        )

    @property
    def n(self) -> int:
        return self.points.n

    def __repr__(self) -> str:
        return (
            f"GradientDescentDesign(n={self.n}, learning_rate={self.learning_rate}, "
            f"iterations={self.iterations})"
        )
