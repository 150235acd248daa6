"""
Synthetic datasets for demos.

All non-random kinds place x on an even grid x_i = (i/n)·10 and add
uniform noise around a known line:

    linear    y = 2x + 3 ± 1
    noisy     y = 1.5x + 5 ± 4
    outliers  y = 2x + 3 ± 1, with ±15 added at indices 5 and 15
    random    x ~ U(0, 10), y ~ U(0, 20), no relationship
"""

from __future__ import annotations

import warnings
from typing import Literal

import numpy as np

from regressionlab.core.defaults import DEFAULT_DATASET_KIND, DEFAULT_DATASET_SIZE
from regressionlab.core.points import PointSet
from regressionlab.core.validation import check_integer


DatasetKind = Literal['linear', 'noisy', 'outliers', 'random']

DATASET_KINDS: tuple[str, ...] = ('linear', 'noisy', 'outliers', 'random')

OUTLIER_POSITIONS = (5, 15)
OUTLIER_MAGNITUDE = 15.0


def generate_dataset(
    kind: DatasetKind = DEFAULT_DATASET_KIND,
    n: int = DEFAULT_DATASET_SIZE,
    *,
    seed: int | np.random.Generator | None = None,
) -> PointSet:
    """
    Generate a teaching dataset.

    Args:
        kind: 'linear', 'noisy', 'outliers' or 'random'. Any other value
            falls back to 'linear' with a UserWarning.
        n: Number of points (>= 0).
        seed: Random seed or Generator. None draws fresh entropy, so
            repeated calls give different data.

    Returns:
        PointSet of n points.

    Raises:
        ValidationError: If n is not a non-negative integer.

    Example:
        >>> ps = generate_dataset('outliers', 20, seed=0)
        >>> len(ps)
        20
    """
    n = check_integer(n, 'n', minimum=0)
    if kind not in DATASET_KINDS:
        warnings.warn(
            f"Unknown dataset kind {kind!r}; falling back to 'linear'",
            UserWarning,
            stacklevel=2,
        )
        kind = 'linear'

    rng = np.random.default_rng(seed)

    if kind == 'random':
        x = rng.random(n) * 10
        y = rng.random(n) * 20
        return PointSet.from_arrays(x, y)

    x = (np.arange(n) / n) * 10 if n else np.empty(0)

    if kind == 'noisy':
        y = 1.5 * x + 5 + (rng.random(n) - 0.5) * 8
        return PointSet.from_arrays(x, y)

    y = 2 * x + 3 + (rng.random(n) - 0.5) * 2

    if kind == 'outliers':
        positions = [i for i in OUTLIER_POSITIONS if i < n]
        signs = np.where(rng.random(len(positions)) > 0.5, 1.0, -1.0)
        y[positions] += signs * OUTLIER_MAGNITUDE

    return PointSet.from_arrays(x, y)
