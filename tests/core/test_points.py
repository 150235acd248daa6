"""
Tests for Point / PointSet construction and access.
"""

from types import SimpleNamespace

import numpy as np
import pytest

from regressionlab.core.exceptions import DimensionError, ValidationError
from regressionlab.core.points import Point, PointSet, as_point_set


class _Table:
    """Minimal table with named columns, shaped like a DataFrame."""

    def __init__(self, **columns):
        self._columns = columns
        self.columns = list(columns)

    def __getitem__(self, key):
        return self._columns[key]


class TestFromPoints:
    """Every supported input shape produces the same PointSet."""

    expected_x = [1.0, 2.0, 3.0]
    expected_y = [2.0, 4.0, 7.0]

    def _check(self, ps):
        np.testing.assert_array_equal(ps.x, self.expected_x)
        np.testing.assert_array_equal(ps.y, self.expected_y)

    def test_mappings(self):
        self._check(PointSet.from_points([{'x': 1, 'y': 2}, {'x': 2, 'y': 4}, {'x': 3, 'y': 7}]))

    def test_pairs(self):
        self._check(PointSet.from_points([(1, 2), (2, 4), (3, 7)]))

    def test_attribute_objects(self):
        items = [SimpleNamespace(x=1, y=2), Point(2.0, 4.0), SimpleNamespace(x=3, y=7)]
        self._check(PointSet.from_points(items))

    def test_array(self):
        self._check(PointSet.from_points(np.array([[1, 2], [2, 4], [3, 7]])))

    def test_table(self):
        self._check(PointSet.from_points(_Table(x=[1, 2, 3], y=[2, 4, 7])))

    def test_from_arrays(self):
        self._check(PointSet.from_arrays([1, 2, 3], [2, 4, 7]))

    def test_point_set_passthrough(self):
        ps = PointSet.from_arrays([1, 2, 3], [2, 4, 7])
        assert PointSet.from_points(ps) is ps
        assert as_point_set(ps) is ps

    def test_empty(self):
        assert PointSet.from_points([]).n == 0
        assert PointSet.from_points(np.empty((0, 2))).n == 0


class TestRejection:

    def test_missing_key(self):
        with pytest.raises(ValidationError, match="missing key 'y'"):
            PointSet.from_points([{'x': 1}])

    def test_triple(self):
        with pytest.raises(DimensionError, match="got 3 values"):
            PointSet.from_points([(1, 2, 3)])

    def test_wrong_array_shape(self):
        with pytest.raises(DimensionError, match=r"\(n, 2\)"):
            PointSet.from_points(np.zeros((4, 3)))

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            PointSet.from_points([(1, np.nan), (2, 3)])

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            PointSet.from_points([('a', 1), ('b', 2)])

    def test_table_without_columns(self):
        with pytest.raises(ValidationError, match="'x' and 'y'"):
            PointSet.from_points(_Table(a=[1], b=[2]))

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            PointSet.from_arrays([1, 2, 3], [1, 2])

    def test_not_iterable(self):
        with pytest.raises(ValidationError):
            PointSet.from_points(42)


class TestAccess:

    def test_iteration_preserves_order(self):
        ps = PointSet.from_points([(3, 1), (1, 2), (2, 3)])
        assert list(ps) == [Point(3.0, 1.0), Point(1.0, 2.0), Point(2.0, 3.0)]

    def test_getitem(self):
        ps = PointSet.from_points([(3, 1), (1, 2)])
        assert ps[1] == Point(1.0, 2.0)

    def test_arrays_read_only(self):
        ps = PointSet.from_points([(1, 2), (2, 3)])
        with pytest.raises(ValueError):
            ps.x[0] = 10.0

    def test_input_array_not_aliased(self):
        data = np.array([[1.0, 2.0], [2.0, 3.0]])
        ps = PointSet.from_points(data)
        data[0, 0] = 99.0
        assert ps.x[0] == 1.0

    def test_without(self):
        ps = PointSet.from_points([(1, 1), (2, 2), (3, 3), (4, 4)])
        rest = ps.without([1, 3])
        np.testing.assert_array_equal(rest.x, [1.0, 3.0])

    def test_subset(self):
        ps = PointSet.from_points([(1, 1), (2, 2), (3, 3)])
        np.testing.assert_array_equal(ps.subset([2, 0]).x, [3.0, 1.0])

    def test_without_out_of_range(self):
        ps = PointSet.from_points([(1, 1), (2, 2)])
        with pytest.raises(ValidationError, match="out of range"):
            ps.without([5])

    def test_to_dicts(self):
        ps = PointSet.from_points([(1, 2)])
        assert ps.to_dicts() == [{'x': 1.0, 'y': 2.0}]
