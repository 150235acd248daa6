"""
Optimization backends.
"""

from regressionlab.optimization.backends.cpu import CPUBatchGradientDescentBackend

__all__ = ['CPUBatchGradientDescentBackend']
