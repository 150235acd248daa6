"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_real_scalar / check_finite_scalar: scalar hyperparameters
    - check_integer: counts and resolutions
    - check_range: (min, max) pairs
    - check_choice: string options
"""

import numpy as np
import pytest

from regressionlab.core.exceptions import DimensionError, ValidationError
from regressionlab.core.validation import (
    check_array,
    check_choice,
    check_consistent_length,
    check_finite,
    check_finite_scalar,
    check_integer,
    check_ndim,
    check_range,
    check_real_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_empty_array(self):
        result = check_array([], "x")
        assert result.shape == (0,)


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_ndim / check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestArrayChecks:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 2.0]), "y")

    def test_ndim_mismatch(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_ndim(np.zeros((2, 2)), 1, "x")

    def test_consistent_length_passes(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("x", "y"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("x", "y"))


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_real_scalar_allows_inf(self):
        assert check_real_scalar(float('inf'), "slope") == float('inf')

    def test_real_scalar_accepts_numpy(self):
        assert check_real_scalar(np.float32(1.5), "slope") == 1.5

    def test_real_scalar_rejects_string(self):
        with pytest.raises(ValidationError, match="slope"):
            check_real_scalar("1.0", "slope")

    def test_real_scalar_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_real_scalar(True, "slope")

    def test_finite_scalar_rejects_nan(self):
        with pytest.raises(ValidationError, match="must be finite"):
            check_finite_scalar(float('nan'), "learning_rate")

    def test_finite_scalar_allows_negative(self):
        assert check_finite_scalar(-0.5, "learning_rate") == -0.5

    def test_integer_ok(self):
        assert check_integer(np.int64(5), "iterations") == 5

    def test_integer_below_minimum(self):
        with pytest.raises(ValidationError, match=">= 1"):
            check_integer(0, "resolution", minimum=1)

    def test_integer_rejects_float(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_integer(3.0, "iterations")

    def test_integer_rejects_bool(self):
        with pytest.raises(ValidationError):
            check_integer(True, "iterations")


# ═══════════════════════════════════════════════════════════════════════
# Ranges and choices
# ═══════════════════════════════════════════════════════════════════════


class TestRangeAndChoice:

    def test_range_tuple(self):
        assert check_range((-2, 2), "slope_range") == (-2.0, 2.0)

    def test_range_list(self):
        assert check_range([0, 1.5], "slope_range") == (0.0, 1.5)

    def test_range_wrong_length(self):
        with pytest.raises(ValidationError, match="got 3 values"):
            check_range((1, 2, 3), "slope_range")

    def test_range_not_iterable(self):
        with pytest.raises(ValidationError, match="pair"):
            check_range(5, "slope_range")

    def test_range_non_finite(self):
        with pytest.raises(ValidationError, match=r"slope_range\[1\]"):
            check_range((0, float('inf')), "slope_range")

    def test_choice_ok(self):
        assert check_choice('mse', ('mse', 'mae'), "loss") == 'mse'

    def test_choice_unknown(self):
        with pytest.raises(ValidationError, match="'huber'"):
            check_choice('huber', ('mse', 'mae'), "loss")
