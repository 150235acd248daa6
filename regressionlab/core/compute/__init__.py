"""
Shared compute infrastructure for regressionlab.

IMPORTANT: This is NOT where module-specific backends live. Those go in
{module}/backends/.
"""

from regressionlab.core.compute.timing import Timer

__all__ = [
    "Timer",
]
