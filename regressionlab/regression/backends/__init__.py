"""
Regression backends.

Available backends:
    CPUClosedFormBackend: centered closed-form least squares
"""

from regressionlab.regression.backends.cpu import CPUClosedFormBackend

__all__ = [
    "CPUClosedFormBackend",
]
