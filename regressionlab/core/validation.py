"""
Input validation utilities for regressionlab.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from regressionlab.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types
    or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_real_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number (NaN and Inf allowed) and return it as float.

    Booleans are rejected even though they are ints in Python.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a real number: {e}") from e


def check_finite_scalar(value: Any, name: str) -> float:
    """
    Verify value is a finite real number and return it as float.

    Raises:
        ValidationError: If value is not a finite real number
    """
    result = check_real_scalar(value, name)
    if not math.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result


def check_integer(value: Any, name: str, *, minimum: int = 0) -> int:
    """
    Verify value is an integer >= minimum and return it as int.

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    result = int(value)
    if result < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {result}")
    return result


def check_range(value: Any, name: str) -> tuple[float, float]:
    """
    Verify value is a (min, max) pair of finite reals.

    min == max is allowed (a degenerate, single-valued axis); min > max is
    allowed too and simply sweeps the axis downwards.

    Raises:
        ValidationError: If value is not a pair of finite reals
    """
    try:
        items = list(value)
    except TypeError as e:
        raise ValidationError(f"{name}: expected a (min, max) pair: {e}") from e
    if len(items) != 2:
        raise ValidationError(
            f"{name}: expected a (min, max) pair, got {len(items)} values"
        )
    low = check_finite_scalar(items[0], f"{name}[0]")
    high = check_finite_scalar(items[1], f"{name}[1]")
    return low, high


def check_choice(value: Any, choices: Iterable[str], name: str) -> str:
    """
    Verify value is one of the allowed string choices.

    Raises:
        ValidationError: If value is not an allowed choice
    """
    allowed = tuple(choices)
    if value not in allowed:
        options = ", ".join(repr(c) for c in allowed)
        raise ValidationError(f"{name}: must be one of {options}, got {value!r}")
    return value
