"""
Synthetic datasets for demos and tests.

Public API:
    generate_dataset(kind, n, seed=None) -> PointSet
"""

from regressionlab.datasets.generators import (
    DATASET_KINDS,
    DatasetKind,
    generate_dataset,
)

__all__ = [
    "generate_dataset",
    "DatasetKind",
    "DATASET_KINDS",
]
