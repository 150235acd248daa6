"""
Default parameter values for regressionlab.

This module is the SINGLE SOURCE OF TRUTH for defaults shared between
solvers, designs and the presentation layer. Import from here, never
repeat the literals.

Usage:
    from regressionlab.core.defaults import DEFAULT_LEARNING_RATE

    run = gradient_descent(points, learning_rate=DEFAULT_LEARNING_RATE * 10)
"""

# Gradient descent
DEFAULT_LEARNING_RATE = 0.01
DEFAULT_ITERATIONS = 100
DEFAULT_INITIAL_SLOPE = 0.0
DEFAULT_INITIAL_INTERCEPT = 0.0

# Cost surface grid
DEFAULT_SLOPE_RANGE = (-2.0, 2.0)
DEFAULT_INTERCEPT_RANGE = (-5.0, 5.0)
DEFAULT_RESOLUTION = 30

# Cost curve sweep (slope axis at a fixed intercept)
DEFAULT_CURVE_SLOPE_RANGE = (-3.0, 5.0)
DEFAULT_CURVE_STEP = 0.1

# Outlier detection (IQR rule)
MIN_OUTLIER_POINTS = 4
IQR_MULTIPLIER = 1.5

# Regularization strength
DEFAULT_LAMBDA = 0.1

# Synthetic datasets
DEFAULT_DATASET_KIND = 'linear'
DEFAULT_DATASET_SIZE = 20

# Display formatting
DEFAULT_DECIMALS = 4
NON_FINITE_PLACEHOLDER = '—'

__all__ = [
    'DEFAULT_LEARNING_RATE',
    'DEFAULT_ITERATIONS',
    'DEFAULT_INITIAL_SLOPE',
    'DEFAULT_INITIAL_INTERCEPT',
    'DEFAULT_SLOPE_RANGE',
    'DEFAULT_INTERCEPT_RANGE',
    'DEFAULT_RESOLUTION',
    'DEFAULT_CURVE_SLOPE_RANGE',
    'DEFAULT_CURVE_STEP',
    'MIN_OUTLIER_POINTS',
    'IQR_MULTIPLIER',
    'DEFAULT_LAMBDA',
    'DEFAULT_DATASET_KIND',
    'DEFAULT_DATASET_SIZE',
    'DEFAULT_DECIMALS',
    'NON_FINITE_PLACEHOLDER',
]
