"""
Generic result container for all regressionlab computations.

Every solver wraps its payload in the same envelope so that timing,
warnings and provenance are reported uniformly, while each module defines
its own parameter structure.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, converged, epochs)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and runtime versions that produced a result."""
    from regressionlab import __version__

    return {
        'regressionlab_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The module-specific parameter payload type

    Attributes:
        params: Module-specific parameters (slope, history, ...)
        info: Structured metadata (method, convergence, epochs)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the library and runtime

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=FitParams(slope=2.0, intercept=0.0, ...),
        ...     info={'method': 'least_squares'},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_closed_form'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=GradientDescentParams(...),
        ...     info={'method': 'batch_gradient_descent', 'converged': False},
        ...     timing=None,
        ...     backend_name='cpu_batch_gd',
        ...     warnings=('Loss became non-finite at epoch 137',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
