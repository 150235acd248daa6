"""
Display formatting for numbers shown next to charts.

format_number() is called mid-render by the presentation layer, so it
never raises: anything that is not a finite real renders as a placeholder.
"""

import math
from numbers import Real
from typing import Any

import numpy as np

from regressionlab.core.defaults import DEFAULT_DECIMALS, NON_FINITE_PLACEHOLDER


def format_number(value: Any, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Format a number with a fixed number of decimals.

    Args:
        value: Number to format
        decimals: Decimal places (negative values are treated as 0)

    Returns:
        Fixed-decimal string, or an em-dash for NaN, infinities, booleans,
        None and any other non-number.

    Example:
        >>> format_number(3.14159, 2)
        '3.14'
        >>> format_number(float('nan'))
        '—'
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        return NON_FINITE_PLACEHOLDER
    try:
        number = float(value)
        places = max(int(decimals), 0)
    except (TypeError, ValueError, OverflowError):
        return NON_FINITE_PLACEHOLDER
    if not math.isfinite(number):
        return NON_FINITE_PLACEHOLDER
    return f"{number:.{places}f}"
