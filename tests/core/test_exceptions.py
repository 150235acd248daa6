"""
Tests for the regressionlab exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via RegressionLabError)
    - Diagnostic attributes on DivergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from regressionlab.core.exceptions import (
    DimensionError,
    DivergenceError,
    NumericalError,
    RegressionLabError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via RegressionLabError."""

    def test_validation_error_is_regressionlab_error(self):
        with pytest.raises(RegressionLabError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_regressionlab_error(self):
        with pytest.raises(RegressionLabError):
            raise NumericalError("computation failed")

    def test_divergence_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DivergenceError("diverged", epoch=3)

    def test_divergence_error_is_not_validation_error(self):
        err = DivergenceError("diverged", epoch=3)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# DivergenceError
# ═══════════════════════════════════════════════════════════════════════


class TestDivergenceError:
    """DivergenceError carries the epoch and loss of the blow-up."""

    def test_all_attributes(self):
        err = DivergenceError(
            "Gradient descent diverged at epoch 12",
            epoch=12,
            loss=float('inf'),
            learning_rate=1.0,
        )
        assert str(err) == "Gradient descent diverged at epoch 12"
        assert err.epoch == 12
        assert err.loss == float('inf')
        assert err.learning_rate == 1.0

    def test_defaults_are_none(self):
        err = DivergenceError("diverged", epoch=1)
        assert err.loss is None
        assert err.learning_rate is None

    def test_catchable_with_attributes(self):
        with pytest.raises(DivergenceError) as exc_info:
            raise DivergenceError("diverged", epoch=7, loss=float('nan'))
        assert exc_info.value.epoch == 7
