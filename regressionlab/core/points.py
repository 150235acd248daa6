"""
Point data for regressionlab.

PointSet is the "I have (x, y) data" abstraction shared by every module.
It accepts the shapes that point data arrives in from a UI or a notebook
and stores it as two validated float64 columns.

Usage:
    from regressionlab.core.points import PointSet

    ps = PointSet.from_points([{'x': 1, 'y': 2}, {'x': 2, 'y': 4}])
    ps = PointSet.from_points([(1, 2), (2, 4)])
    ps = PointSet.from_points(np.array([[1, 2], [2, 4]]))
    ps = PointSet.from_points(df)          # table with 'x' and 'y' columns
    ps = PointSet.from_arrays(x=xs, y=ys)

    ps.x, ps.y     # float64 arrays
    list(ps)       # [Point(x=1.0, y=2.0), Point(x=2.0, y=4.0)]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regressionlab.core.exceptions import ValidationError, DimensionError
from regressionlab.core.validation import (
    check_array,
    check_finite,
    check_ndim,
    check_consistent_length,
)


@dataclass(frozen=True)
class Point:
    """A single observation."""
    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True, eq=False)
class PointSet:
    """
    Immutable, validated sequence of points in insertion order.

    Construct via factory classmethods, not directly.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PointSet:
        """
        Build a PointSet from separate x and y columns.

        Raises:
            ValidationError: If values are non-numeric or non-finite
            DimensionError: If columns are not 1D or differ in length
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)

    @classmethod
    def from_points(cls, points: Any) -> PointSet:
        """
        Build a PointSet from any supported point container.

        Supported:
            - PointSet (returned unchanged)
            - table-like object with 'x' and 'y' columns (e.g. DataFrame)
            - (n, 2) array
            - sequence of {'x': .., 'y': ..} mappings
            - sequence of objects with .x and .y attributes
            - sequence of (x, y) pairs
        """
        if isinstance(points, PointSet):
            return points

        if hasattr(points, 'columns'):
            columns = [str(c) for c in points.columns]
            if 'x' not in columns or 'y' not in columns:
                raise ValidationError(
                    f"points: table needs 'x' and 'y' columns, got {columns}"
                )
            return cls.from_arrays(np.asarray(points['x']), np.asarray(points['y']))

        if isinstance(points, np.ndarray):
            arr = check_array(points, 'points')
            if arr.size == 0:
                return cls._build(np.empty(0), np.empty(0))
            check_ndim(arr, 2, 'points')
            if arr.shape[1] != 2:
                raise DimensionError(
                    f"points: expected shape (n, 2), got {arr.shape}"
                )
            return cls._build(arr[:, 0].copy(), arr[:, 1].copy())

        try:
            items = list(points)
        except TypeError as e:
            raise ValidationError(f"points: expected a sequence of points: {e}") from e

        xs = []
        ys = []
        for i, item in enumerate(items):
            x, y = _unpack_point(item, i)
            xs.append(x)
            ys.append(y)

        return cls._build(check_array(xs, 'x'), check_array(ys, 'y'))

    @classmethod
    def _build(
        cls,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
    ) -> PointSet:
        """Internal builder with validation."""
        check_ndim(x, 1, 'x')
        check_ndim(y, 1, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_finite(x, 'x')
        check_finite(y, 'y')

        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x coordinates, shape (n,). Read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y coordinates, shape (n,). Read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of points."""
        return int(self._x.shape[0])

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[Point]:
        for x, y in zip(self._x, self._y):
            yield Point(x=float(x), y=float(y))

    def __getitem__(self, index: int) -> Point:
        return Point(x=float(self._x[index]), y=float(self._y[index]))

    def subset(self, indices: Iterable[int]) -> PointSet:
        """Points at the given indices, in the order given."""
        idx = self._check_indices(indices)
        return PointSet._build(self._x[idx], self._y[idx])

    def without(self, indices: Iterable[int]) -> PointSet:
        """Points not at the given indices, in original order."""
        idx = self._check_indices(indices)
        keep = np.ones(self.n, dtype=bool)
        keep[idx] = False
        return PointSet._build(self._x[keep], self._y[keep])

    def _check_indices(self, indices: Iterable[int]) -> NDArray[np.intp]:
        idx = np.asarray(list(indices))
        if idx.size == 0:
            return np.empty(0, dtype=np.intp)
        if not np.issubdtype(idx.dtype, np.integer):
            raise ValidationError(
                f"indices: expected integers, got dtype {idx.dtype}"
            )
        bad = idx[(idx < 0) | (idx >= self.n)]
        if bad.size:
            raise ValidationError(
                f"indices: {bad.tolist()} out of range for {self.n} points"
            )
        return idx.astype(np.intp)

    def to_dicts(self) -> list[dict[str, float]]:
        """Points as [{'x': .., 'y': ..}, ...] for JSON consumers."""
        return [p.to_dict() for p in self]

    def __repr__(self) -> str:
        return f"PointSet(n={self.n})"


def as_point_set(points: Any) -> PointSet:
    """Convert any supported point container to a PointSet if needed."""
    if isinstance(points, PointSet):
        return points
    return PointSet.from_points(points)


def _unpack_point(item: Any, index: int) -> tuple[Any, Any]:
    """Extract (x, y) from a mapping, an attribute object, or a pair."""
    if isinstance(item, Mapping):
        try:
            return item['x'], item['y']
        except KeyError as e:
            raise ValidationError(
                f"points[{index}]: mapping is missing key {e.args[0]!r}"
            ) from e

    if hasattr(item, 'x') and hasattr(item, 'y'):
        return item.x, item.y

    try:
        pair = tuple(item)
    except TypeError as e:
        raise ValidationError(
            f"points[{index}]: expected a mapping, an (x, y) pair, "
            f"or an object with x and y, got {type(item).__name__}"
        ) from e
    if len(pair) != 2:
        raise DimensionError(
            f"points[{index}]: expected an (x, y) pair, got {len(pair)} values"
        )
    return pair
