"""
Tests for cost_surface() and cost_curve().
"""

import pytest
import numpy as np

from regressionlab.diagnostics import cost_surface, cost_curve, CostSurface
from regressionlab.metrics import mse, mae
from regressionlab.core.exceptions import ValidationError


class TestCostSurface:

    def test_shape(self, perfect_points):
        surface = cost_surface(perfect_points, (-2, 2), (-5, 5), 10)
        assert isinstance(surface, CostSurface)
        assert surface.shape == (11, 11)
        assert surface.slopes.shape == (11, 11)
        assert surface.intercepts.shape == (11, 11)

    def test_axes(self, perfect_points):
        surface = cost_surface(perfect_points, (-2, 2), (-5, 5), 10)
        np.testing.assert_allclose(surface.slopes[:, 0], np.linspace(-2, 2, 11), atol=1e-12)
        np.testing.assert_allclose(surface.intercepts[0, :], np.linspace(-5, 5, 11), atol=1e-12)
        # slope varies along i, intercept along j
        assert np.all(surface.slopes[3, :] == surface.slopes[3, 0])
        assert np.all(surface.intercepts[:, 7] == surface.intercepts[0, 7])

    def test_every_vertex_equals_mse(self, noisy_line):
        surface = cost_surface(noisy_line, (-1, 3), (-4, 2), 6)
        for i in range(7):
            for j in range(7):
                expected = mse(noisy_line, surface.slopes[i, j], surface.intercepts[i, j])
                assert surface.costs[i, j] == pytest.approx(expected, rel=1e-12, abs=1e-12)

    def test_every_vertex_equals_mae(self, noisy_line):
        surface = cost_surface(noisy_line, (0, 2), (-3, 1), 5, loss='mae')
        expected = np.array([
            [mae(noisy_line, s, b) for s, b in zip(row_s, row_b)]
            for row_s, row_b in zip(surface.slopes, surface.intercepts)
        ])
        np.testing.assert_allclose(surface.costs, expected, rtol=1e-12)

    def test_minimum_near_true_line(self, perfect_points):
        surface = cost_surface(perfect_points, (0, 4), (-2, 2), 20)
        i, j = np.unravel_index(np.argmin(surface.costs), surface.shape)
        assert surface.slopes[i, j] == pytest.approx(2.0)
        assert surface.intercepts[i, j] == pytest.approx(0.0, abs=1e-12)
        assert surface.costs[i, j] == pytest.approx(0.0, abs=1e-20)

    def test_defaults(self, perfect_points):
        surface = cost_surface(perfect_points)
        assert surface.shape == (31, 31)
        assert surface.slopes[0, 0] == -2.0
        assert surface.intercepts[0, 0] == -5.0

    def test_mae_loss(self, perfect_points):
        surface = cost_surface(perfect_points, (-1, 1), (-1, 1), 4, loss='mae')
        assert surface.loss == 'mae'
        assert surface.costs[2, 2] == pytest.approx(
            mae(perfect_points, surface.slopes[2, 2], surface.intercepts[2, 2]), rel=1e-12, abs=1e-12
        )

    def test_cap(self, perfect_points):
        surface = cost_surface(perfect_points, (-10, 10), (-10, 10), 8, cap=50.0)
        assert surface.costs.max() == 50.0
        uncapped = cost_surface(perfect_points, (-10, 10), (-10, 10), 8)
        assert uncapped.costs.max() > 50.0

    def test_empty_points(self):
        surface = cost_surface([], (-1, 1), (-1, 1), 2)
        assert np.all(surface.costs == 0.0)

    def test_to_dict(self, perfect_points):
        record = cost_surface(perfect_points, (-1, 1), (-1, 1), 1).to_dict()
        assert set(record) == {'slopes', 'intercepts', 'costs'}
        assert len(record['costs']) == 2
        assert len(record['costs'][0]) == 2

    @pytest.mark.parametrize("resolution", [0, -3, 2.5])
    def test_bad_resolution(self, perfect_points, resolution):
        with pytest.raises(ValidationError, match="resolution"):
            cost_surface(perfect_points, (-2, 2), (-5, 5), resolution)

    def test_bad_range(self, perfect_points):
        with pytest.raises(ValidationError, match="slope_range"):
            cost_surface(perfect_points, (-2, 2, 4), (-5, 5), 10)

    def test_unknown_loss(self, perfect_points):
        with pytest.raises(ValidationError, match="loss"):
            cost_surface(perfect_points, loss='huber')


class TestCostCurve:

    def test_default_sampling(self, perfect_points):
        curve = cost_curve(perfect_points, 0.0)
        assert curve.slopes.shape == (81,)
        assert curve.slopes[0] == -3.0
        assert curve.slopes[-1] == pytest.approx(5.0)

    def test_costs_match_mse(self, perfect_points):
        curve = cost_curve(perfect_points, 1.0, (0, 4), 0.5)
        for s, c in zip(curve.slopes, curve.costs):
            assert c == mse(perfect_points, s, 1.0)

    def test_minimum_at_true_slope(self, perfect_points):
        curve = cost_curve(perfect_points, 0.0, (0, 4), 0.25)
        assert curve.slopes[np.argmin(curve.costs)] == pytest.approx(2.0)

    def test_single_sample(self, perfect_points):
        curve = cost_curve(perfect_points, 0.0, (2, 2), 0.1)
        assert curve.slopes.tolist() == [2.0]

    def test_to_dict(self, perfect_points):
        record = cost_curve(perfect_points, 0.0, (0, 1), 0.5).to_dict()
        assert record['weights'] == [0.0, 0.5, 1.0]

    def test_bad_step(self, perfect_points):
        with pytest.raises(ValidationError, match="step"):
            cost_curve(perfect_points, 0.0, (0, 1), 0.0)

    def test_descending_range(self, perfect_points):
        with pytest.raises(ValidationError, match="slope_range"):
            cost_curve(perfect_points, 0.0, (1, 0), 0.1)
