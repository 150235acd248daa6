"""
Core infrastructure for regressionlab.

Shared abstractions used by every module (regression, metrics,
optimization, diagnostics, datasets).

Key components:
    points: Point, PointSet and the point-input conversion
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Default parameter values
    formatting: Display formatting
    compute: Timing utilities
"""

from regressionlab.core.points import Point, PointSet, as_point_set
from regressionlab.core.result import Result
from regressionlab.core.formatting import format_number
from regressionlab.core.exceptions import (
    RegressionLabError,
    ValidationError,
    DimensionError,
    NumericalError,
    DivergenceError,
)

__all__ = [
    # Points
    "Point",
    "PointSet",
    "as_point_set",
    # Result
    "Result",
    # Formatting
    "format_number",
    # Exceptions
    "RegressionLabError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DivergenceError",
]
